"""
EchoPath Classroom - Runtime game engine.

This module provides:
- build_curriculum: Build the Unit -> Lesson -> Level tree for a theme
- Navigator: Progression cursor and level-to-level transitions
- RoundState: Word-placement puzzle for the current level
- GameEngine: One game session tying the above together
- EventBus: Change notifications for front ends
"""

from .builder import (
    build_curriculum,
    build_lesson,
    fill_token,
    DEFAULT_TEMPLATES,
    DEFAULT_UNIT_TITLE,
)

from .progression import (
    Navigator,
    CursorLookup,
    UNKNOWN_LESSON_NAME,
    UNKNOWN_UNIT_TITLE,
)

from .round import (
    RoundState,
    DEFAULT_SUCCESS_MESSAGE,
    DEFAULT_FAILURE_MESSAGE,
)

from .events import EventBus

from .engine import GameEngine

__all__ = [
    # Builder
    "build_curriculum",
    "build_lesson",
    "fill_token",
    "DEFAULT_TEMPLATES",
    "DEFAULT_UNIT_TITLE",
    # Progression
    "Navigator",
    "CursorLookup",
    "UNKNOWN_LESSON_NAME",
    "UNKNOWN_UNIT_TITLE",
    # Round
    "RoundState",
    "DEFAULT_SUCCESS_MESSAGE",
    "DEFAULT_FAILURE_MESSAGE",
    # Engine
    "EventBus",
    "GameEngine",
]
