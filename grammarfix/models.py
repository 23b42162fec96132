"""Data types shared by the alignment engine and the suggestion provider."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Correction(BaseModel):
    """A provider claim that a surface form in the input is mistaken."""

    model_config = ConfigDict(frozen=True)

    word: StrictStr = Field(
        description="The mistaken text as it appears in the input (may span words, e.g. 'she go')"
    )

    suggestion: StrictStr = Field(description="The suggested replacement")


@dataclass(frozen=True)
class Token:
    """A word-like run or a single punctuation character of the input."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Segment:
    """A contiguous piece of the rendered output."""

    text: str
    is_mistake: bool = False
