"""
Progress schemas for EchoPath.

Defines Pydantic models for game progress including:
- Position in the curriculum tree (progression cursor)
- Level / placement / transition status values
- Read-only snapshots of round and engine state for the rendering layer
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LevelStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class PlacementOutcome(str, Enum):
    """Result of dropping a word on a slot."""
    CORRECT = "correct"       # placed, slot cursor advanced
    INCORRECT = "incorrect"   # wrong word for the expected slot
    IGNORED = "ignored"       # not the expected slot; nothing changed


class Transition(str, Enum):
    """Which boundary an advance crossed."""
    LEVEL = "level"
    LESSON = "lesson"
    UNIT = "unit"
    NONE = "none"             # already at the final level


class ProgressCursor(BaseModel):
    """Position in the Unit -> Lesson -> Level tree (0-based)."""
    model_config = ConfigDict(frozen=True)

    unit_index: int = Field(default=0, ge=0)
    lesson_index: int = Field(default=0, ge=0)
    level_index: int = Field(default=0, ge=0)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.unit_index, self.lesson_index, self.level_index)


class RoundSnapshot(BaseModel):
    target: list[str]
    word_bank: list[str]
    slots: list[Optional[str]]
    slot_cursor: int
    feedback: str
    status: LevelStatus


class EngineSnapshot(BaseModel):
    """Everything a front end needs to draw one frame."""
    theme: str
    cursor: ProgressCursor
    unit_title: str
    lesson_name: str
    lesson_number: int        # 1-based, for display
    level_number: int         # 1-based, for display
    has_next: bool
    next_action_label: str
    round: RoundSnapshot
    version: int
