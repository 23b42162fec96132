"""Exceptions raised by grammarfix.

UI layers (CLI, web) catch `GrammarFixError` subclasses and turn them into
user-facing notices. Nothing here is fatal to the process.
"""


class GrammarFixError(Exception):
    """Base class for all grammarfix errors."""

    title: str = "Error"


class ValidationError(GrammarFixError):
    """User input is missing or blank."""

    title = "Input Required"


class ProviderError(GrammarFixError):
    """The suggestion provider could not produce corrections."""


class MalformedResponse(ProviderError):
    """The LLM answer is not a JSON array of {word, suggestion} objects."""

    title = "AI Error"

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class TransportError(ProviderError):
    """The LLM call did not complete (network, auth, rate limit, non-2xx)."""


class ConfigError(GrammarFixError):
    """The configuration file or environment holds an invalid value."""

    title = "Configuration Error"
