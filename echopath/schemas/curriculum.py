"""
Curriculum schemas for EchoPath.

Defines Pydantic models for the sentence-building curriculum:
- Level: one target sentence (ordered words)
- Lesson / Unit / Curriculum: the Unit -> Lesson -> Level tree
- LessonTemplate / UnitTemplate: theme-independent content the builder fills in
"""

import string
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Placeholders allowed inside template tokens:
#   {Theme} -> theme exactly as given (stand-alone token, e.g. "Dog")
#   {theme} -> lower-cased theme (composed into sentences, e.g. "dog")
TEMPLATE_PLACEHOLDERS = {"Theme", "theme"}


def validate_non_decreasing(lengths: list[int]) -> list[int]:
    """Shared check: sentence lengths never shrink from one level to the next."""
    for prev, nxt in zip(lengths, lengths[1:]):
        if nxt < prev:
            raise ValueError(
                f"Level lengths must be non-decreasing, got {prev} then {nxt}"
            )
    return lengths


# -----------------------------------------------------------------------------
# Curriculum tree (immutable once built)
# -----------------------------------------------------------------------------

class Level(BaseModel):
    """A playable puzzle: the target sentence, one word per slot."""
    model_config = ConfigDict(frozen=True)

    words: list[str] = Field(..., min_length=1)

    def __len__(self) -> int:
        return len(self.words)


class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    motif: Optional[str] = None  # action / emotion / interaction
    levels: list[Level] = Field(..., min_length=1)

    @model_validator(mode="after")
    def lengths_non_decreasing(self):
        validate_non_decreasing([len(level.words) for level in self.levels])
        return self


class Unit(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    lessons: list[Lesson] = Field(..., min_length=1)


class Curriculum(BaseModel):
    """
    Full curriculum for one game session.

    Built once from a theme (the chosen animal) and never mutated.
    """
    model_config = ConfigDict(frozen=True)

    theme: str
    units: list[Unit] = Field(..., min_length=1)

    def lesson_names(self, unit_index: int = 0) -> list[str]:
        """Lesson names index-aligned with the unit's lessons ([] if no such unit)."""
        if not 0 <= unit_index < len(self.units):
            return []
        return [lesson.name for lesson in self.units[unit_index].lessons]

    def sentences(self) -> list[list[list[list[str]]]]:
        """Raw [unit][lesson][level] -> words view of the tree."""
        return [
            [[list(level.words) for level in lesson.levels] for lesson in unit.lessons]
            for unit in self.units
        ]


# -----------------------------------------------------------------------------
# Templates (content, swappable)
# -----------------------------------------------------------------------------

class LessonTemplate(BaseModel):
    """
    Theme-independent lesson content.

    Each level is a list of tokens; tokens may contain the {Theme} / {theme}
    placeholders.
    """
    name: str
    motif: Optional[str] = None
    levels: list[list[str]] = Field(..., min_length=1)

    @field_validator("levels")
    @classmethod
    def levels_valid(cls, v):
        for tokens in v:
            if not tokens:
                raise ValueError("Every level needs at least one word")
            for token in tokens:
                for _, name, spec, conversion in string.Formatter().parse(token):
                    if name is None:
                        continue
                    if name not in TEMPLATE_PLACEHOLDERS:
                        raise ValueError(f"Unknown placeholder {name!r} in token {token!r}")
                    if spec or conversion:
                        raise ValueError(f"Placeholders take no conversion or format spec: {token!r}")
                token.format(Theme="X", theme="x")  # any leftover formatting error surfaces here
        validate_non_decreasing([len(tokens) for tokens in v])
        return v


class UnitTemplate(BaseModel):
    title: str
    lessons: list[LessonTemplate] = Field(..., min_length=1)
