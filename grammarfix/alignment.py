"""Mapping LLM corrections back onto the text the user typed.

The input is split into tokens (word-like runs and single punctuation
marks). Every token is compared with the `word` of each correction and the
text is rebuilt as a list of segments, with the untokenized gaps between
tokens kept verbatim, so that `"".join(s.text for s in segments)` is always
the original text.
"""

import re
from typing import Iterable, Sequence

from grammarfix.models import Correction, Segment, Token

# words with contractions ("don't", "don’t") or one punctuation mark
TOKEN_PATTERN = re.compile(r"[\w'’]+|[.,!?;]")


def tokenize(text: str) -> list[Token]:
    """Split `text` into tokens, left to right.

    Each match is searched from the end of the previous one, so repeated
    words get increasing offsets ("go go go" -> 0, 3, 6).

    Args:
        text: Text to tokenize.

    Returns:
        Tokens in document order. Empty for empty input.
    """
    return [
        Token(text=m.group(), start=m.start(), end=m.end())
        for m in TOKEN_PATTERN.finditer(text)
    ]


def _phrases(corrections: Iterable[Correction]) -> list[list[str]]:
    """Lower-cased token lists of corrections that span two or more tokens."""
    phrases = []
    for correction in corrections:
        words = [t.text.lower() for t in tokenize(correction.word)]
        if len(words) > 1:
            phrases.append(words)
    return phrases


def _phrase_hits(tokens: Sequence[Token], phrases: list[list[str]]) -> set[int]:
    """Indices of tokens covered by a contiguous match of any phrase."""
    lowered = [t.text.lower() for t in tokens]
    hits: set[int] = set()
    for i in range(len(lowered)):
        for phrase in phrases:
            if lowered[i : i + len(phrase)] == phrase:
                hits.update(range(i, i + len(phrase)))
    return hits


def build_segments(
    text: str,
    corrections: Sequence[Correction],
    match_phrases: bool = False,
) -> list[Segment]:
    """Split `text` into plain and mistaken segments.

    A token is a mistake when its lower-cased text equals the lower-cased
    `word` of at least one correction. Containment does not count: "go"
    does not match a token "going". A correction whose `word` spans several
    tokens ("she go") therefore never matches, unless `match_phrases` is
    set, in which case every token of a matching run of tokens is marked.

    Gaps between tokens, and the text after the last token, are emitted as
    plain segments.

    Args:
        text: The text that was checked.
        corrections: Corrections returned by the suggestion provider.
        match_phrases: Also mark runs of tokens matching multi-word corrections.

    Returns:
        Segments in document order; their texts concatenate to `text`.
    """
    tokens = tokenize(text)
    words = [c.word.lower() for c in corrections]
    in_phrase = _phrase_hits(tokens, _phrases(corrections)) if match_phrases else set()

    segments: list[Segment] = []
    last_index = 0
    for i, token in enumerate(tokens):
        gap = text[last_index : token.start]
        if gap:
            segments.append(Segment(gap))

        lowered = token.text.lower()
        is_mistake = any(word == lowered for word in words) or i in in_phrase
        segments.append(Segment(token.text, is_mistake))
        last_index = token.end

    tail = text[last_index:]
    if tail:
        segments.append(Segment(tail))
    return segments


def render_markup(segments: Iterable[Segment], start: str = "[", end: str = "]") -> str:
    """Join segments back into text, wrapping mistakes in `start`/`end`.

    Example:
        >>> render_markup(build_segments("He go home.", [Correction(word="go", suggestion="goes")]))
        'He [go] home.'
    """
    return "".join(
        f"{start}{s.text}{end}" if s.is_mistake else s.text for s in segments
    )
