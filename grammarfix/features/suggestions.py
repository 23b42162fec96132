"""Grammar suggestions from an LLM.

The model is asked for a bare JSON array of `{"word", "suggestion"}`
objects. Anything else it answers with is reported as `MalformedResponse`.
"""

import re

import openai
import pydantic

from grammarfix.errors import MalformedResponse, TransportError, ValidationError
from grammarfix.features.llm_api import DEFAULT_TEXT_MODEL, call_llm
from grammarfix.models import Correction
from grammarfix.util.logs import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT: str = """
You're a grammar correction assistant.

Analyze the sentence given by the user and return ONLY a JSON array of incorrect words with suggestions.

Format:
[
  { "word": "go", "suggestion": "goes" },
  { "word": "she go", "suggestion": "she goes" }
]

Return [] if the sentence has no mistakes.
"""

_CORRECTIONS = pydantic.TypeAdapter(list[Correction])
_FENCE = re.compile(r"^```[\w-]*\s*(.*?)\s*```$", re.DOTALL)


def unwrap_answer(raw: str) -> str:
    """Strip whitespace and an optional markdown code fence around `raw`."""
    text = raw.strip()
    fenced = _FENCE.match(text)
    if fenced:
        return fenced.group(1)
    return text


def parse_corrections(raw: str) -> list[Correction]:
    """Parse an LLM answer into corrections.

    Args:
        raw: The model's answer text.

    Returns:
        Corrections in the order the model listed them.

    Raises:
        MalformedResponse: If the answer is not a JSON array of objects with
            string `word` and `suggestion` fields.
    """
    try:
        return _CORRECTIONS.validate_json(unwrap_answer(raw))
    except pydantic.ValidationError as e:
        logger.warning(f"Failed to parse: {raw!r}")
        raise MalformedResponse("Could not parse AI response", raw=raw) from e


class SuggestionProvider:
    """Asks an OpenAI model which words of a sentence are mistaken."""

    def __init__(self, api_key: str = "", model: str = DEFAULT_TEXT_MODEL):
        """Initialize the provider.

        Args:
            api_key: OpenAI API key.
            model: OpenAI model name.
        """
        self.api_key = api_key
        self.model = model

    def get_corrections(self, text: str) -> list[Correction]:
        """Return the corrections the model suggests for `text`.

        Raises:
            ValidationError: If `text` is empty or whitespace only.
            TransportError: If the model could not be reached.
            MalformedResponse: If the answer cannot be parsed.
        """
        if not text.strip():
            raise ValidationError("Please enter text to check.")

        query = f'Sentence: "{text}"'
        try:
            raw = call_llm(
                query=query,
                sys_prompt=SYSTEM_PROMPT,
                model=self.model,
                api_key=self.api_key,
            )
        except openai.OpenAIError as e:
            logger.error(f"Grammar check request failed: {e}")
            raise TransportError("Something went wrong. Try again.") from e

        logger.debug(f"Model answered with {len(raw)} characters")
        corrections = parse_corrections(raw)
        logger.debug(f"Parsed {len(corrections)} corrections")
        return corrections
