"""State of the grammar check screen.

The screen owns one immutable `CheckState` and replaces it as a whole on
every transition:

    idle -> checking -> success | error -> idle

While a check is in flight (`busy`), further checks are ignored.
"""

from dataclasses import dataclass, replace
from typing import Iterator, Literal

from grammarfix.alignment import build_segments
from grammarfix.errors import GrammarFixError, ProviderError, ValidationError
from grammarfix.features.suggestions import SuggestionProvider
from grammarfix.models import Correction, Segment
from grammarfix.util.logs import get_logger

logger = get_logger(__name__)

Phase = Literal["idle", "checking", "success", "error"]


@dataclass(frozen=True)
class Notice:
    """A message to show to the user."""

    title: str
    message: str

    @classmethod
    def from_error(cls, error: GrammarFixError) -> "Notice":
        return cls(title=error.title, message=str(error))


UNEXPECTED_ERROR = Notice(title="Error", message="Something went wrong. Try again.")


@dataclass(frozen=True)
class CheckState:
    phase: Phase = "idle"
    input_text: str = ""
    segments: tuple[Segment, ...] = ()
    corrections: tuple[Correction, ...] = ()
    notice: Notice | None = None

    @property
    def busy(self) -> bool:
        return self.phase == "checking"


class CheckScreen:
    """Drives grammar checks and keeps the resulting view state.

    Args:
        provider: Source of corrections.
        state: State to resume from, e.g. one kept in a web session.
        match_phrases: Also highlight multi-word corrections.
    """

    def __init__(
        self,
        provider: SuggestionProvider,
        state: CheckState | None = None,
        match_phrases: bool = False,
    ):
        self.provider = provider
        self.state = state or CheckState()
        self.match_phrases = match_phrases

    def set_input(self, text: str) -> CheckState:
        """Replace the input text, dropping any previous result."""
        if not self.state.busy:
            self.state = CheckState(input_text=text)
        return self.state

    def dismiss_notice(self) -> CheckState:
        self.state = replace(self.state, notice=None)
        return self.state

    def run_check(self, text: str | None = None) -> Iterator[CheckState]:
        """Check `text` (or the current input), yielding every new state.

        Yields nothing if a check is already running. Blank input keeps the
        phase, drops any previous result and adds a notice. Every check that
        starts ends in `success` or `error`, so `busy` never outlives it.
        """
        if self.state.busy:
            logger.debug("Check already in progress, ignoring request")
            return

        text = self.state.input_text if text is None else text
        if not text.strip():
            error = ValidationError("Please enter text to check.")
            self.state = replace(
                self.state,
                input_text=text,
                segments=(),
                corrections=(),
                notice=Notice.from_error(error),
            )
            yield self.state
            return

        self.state = CheckState(phase="checking", input_text=text)
        yield self.state

        try:
            corrections = self.provider.get_corrections(text)
            segments = build_segments(text, corrections, match_phrases=self.match_phrases)
        except ProviderError as e:
            logger.info(f"Grammar check failed: {type(e).__name__}")
            self.state = CheckState(phase="error", notice=Notice.from_error(e))
        except Exception:
            logger.exception("Unexpected error during grammar check")
            self.state = CheckState(phase="error", notice=UNEXPECTED_ERROR)
        else:
            self.state = CheckState(
                phase="success",
                input_text=text,
                segments=tuple(segments),
                corrections=tuple(corrections),
            )
        yield self.state

    def check(self, text: str | None = None) -> CheckState:
        """Run a check to completion and return the final state."""
        for _ in self.run_check(text):
            pass
        return self.state
