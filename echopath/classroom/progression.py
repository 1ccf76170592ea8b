"""
Navigator - Position in the curriculum and level-to-level progression.

Provides:
- Cursor lookup resolved once into a tagged result (valid / out of range)
- Boundary queries (last level in lesson, last lesson in unit, has next)
- advance(): level -> lesson -> unit progression
- Display labels for the header and the next button

Nothing here raises: an out-of-range cursor reads as terminal and empty.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from echopath.schemas import Curriculum, Lesson, Level, ProgressCursor, Transition, Unit

logger = logging.getLogger(__name__)

UNKNOWN_LESSON_NAME = "Unknown Lesson"
UNKNOWN_UNIT_TITLE = "Unknown Unit"


@dataclass(frozen=True)
class CursorLookup:
    """Cursor resolved against the curriculum."""
    valid: bool
    unit: Optional[Unit] = None
    lesson: Optional[Lesson] = None
    level: Optional[Level] = None
    unit_count: int = 0

    @classmethod
    def out_of_range(cls, unit_count: int = 0) -> "CursorLookup":
        return cls(valid=False, unit_count=unit_count)


class Navigator:
    """
    Tracks the progression cursor over an immutable curriculum.

    The cursor starts at (0, 0, 0) and changes only through advance().
    """

    def __init__(self, curriculum: Curriculum, cursor: Optional[ProgressCursor] = None):
        self.curriculum = curriculum
        self.cursor = cursor or ProgressCursor()

    def lookup(self) -> CursorLookup:
        """Resolve the cursor in one place instead of guarding every accessor."""
        units = self.curriculum.units
        c = self.cursor
        if c.unit_index >= len(units):
            return CursorLookup.out_of_range(len(units))
        unit = units[c.unit_index]
        if c.lesson_index >= len(unit.lessons):
            return CursorLookup.out_of_range(len(units))
        lesson = unit.lessons[c.lesson_index]
        if c.level_index >= len(lesson.levels):
            return CursorLookup.out_of_range(len(units))
        return CursorLookup(
            valid=True,
            unit=unit,
            lesson=lesson,
            level=lesson.levels[c.level_index],
            unit_count=len(units),
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def current_level(self) -> list[str]:
        """Target words at the cursor, or [] when out of range."""
        found = self.lookup()
        if not found.valid:
            return []
        return list(found.level.words)

    def current_lesson_name(self) -> str:
        found = self.lookup()
        return found.lesson.name if found.valid else UNKNOWN_LESSON_NAME

    def current_unit_title(self) -> str:
        found = self.lookup()
        return found.unit.title if found.valid else UNKNOWN_UNIT_TITLE

    def is_last_level_in_lesson(self) -> bool:
        found = self.lookup()
        if not found.valid:
            return True
        return self.cursor.level_index >= len(found.lesson.levels) - 1

    def is_last_lesson_in_unit(self) -> bool:
        found = self.lookup()
        if not found.valid:
            return True
        return self.cursor.lesson_index >= len(found.unit.lessons) - 1

    def is_last_unit(self) -> bool:
        found = self.lookup()
        if not found.valid:
            return True
        return self.cursor.unit_index >= found.unit_count - 1

    def has_next(self) -> bool:
        """True if any later level, lesson or unit exists."""
        if not self.lookup().valid:
            return False
        return not (
            self.is_last_level_in_lesson()
            and self.is_last_lesson_in_unit()
            and self.is_last_unit()
        )

    # -------------------------------------------------------------------------
    # Labels
    # -------------------------------------------------------------------------

    def position_label(self) -> str:
        """e.g. 'Lesson 2: Emotions'"""
        return f"Lesson {self.cursor.lesson_index + 1}: {self.current_lesson_name()}"

    def level_label(self) -> str:
        return f"Level {self.cursor.level_index + 1}"

    def next_action_label(self) -> str:
        """
        Text for the next button.

        Returns:
            'Next Level' inside a lesson, 'Next Lesson' at the end of a lesson,
            'Complete!' at the end of the unit
        """
        if not self.is_last_level_in_lesson():
            return "Next Level"
        if not self.is_last_lesson_in_unit():
            return "Next Lesson"
        return "Complete!"

    # -------------------------------------------------------------------------
    # Transition
    # -------------------------------------------------------------------------

    def advance(self) -> Transition:
        """
        Move to the next level, crossing lesson and unit boundaries.

        Returns:
            The boundary crossed; Transition.NONE means the cursor did not move.
        """
        if not self.lookup().valid:
            logger.warning("advance() with out-of-range cursor %s", self.cursor.as_tuple())
            return Transition.NONE

        c = self.cursor
        if not self.is_last_level_in_lesson():
            self.cursor = ProgressCursor(
                unit_index=c.unit_index,
                lesson_index=c.lesson_index,
                level_index=c.level_index + 1,
            )
            transition = Transition.LEVEL
        elif not self.is_last_lesson_in_unit():
            self.cursor = ProgressCursor(
                unit_index=c.unit_index,
                lesson_index=c.lesson_index + 1,
                level_index=0,
            )
            transition = Transition.LESSON
        elif not self.is_last_unit():
            self.cursor = ProgressCursor(unit_index=c.unit_index + 1)
            transition = Transition.UNIT
        else:
            return Transition.NONE

        logger.info(
            "Advanced %s: %s -> %s",
            transition.value,
            c.as_tuple(),
            self.cursor.as_tuple(),
        )
        return transition
