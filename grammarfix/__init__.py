"""Top-level package for grammarfix.

Highlights grammar mistakes in a sentence using corrections suggested by
an OpenAI model.
"""

__version__ = "0.1.0"

__all__ = [
    "alignment",
    "config",
    "errors",
    "features",
    "models",
    "scenarios",
    "session",
    "util",
    "web",
]
