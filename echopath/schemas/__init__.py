"""
EchoPath Schemas - Pydantic models for the sentence-building game.

This module exports all schema classes for:
- Curriculum: levels, lessons, units, content templates
- Progress: cursor, status values, round/engine snapshots
- Profile: login payload (child profile and preferences)
"""

# Curriculum schemas
from .curriculum import (
    Level,
    Lesson,
    Unit,
    Curriculum,
    LessonTemplate,
    UnitTemplate,
    TEMPLATE_PLACEHOLDERS,
    validate_non_decreasing,
)

# Progress schemas
from .progress import (
    LevelStatus,
    PlacementOutcome,
    Transition,
    ProgressCursor,
    RoundSnapshot,
    EngineSnapshot,
)

# Profile schemas
from .profile import (
    Child,
    Preferences,
    LoginResponse,
    LoginRequest,
)

__all__ = [
    # Curriculum
    'Level',
    'Lesson',
    'Unit',
    'Curriculum',
    'LessonTemplate',
    'UnitTemplate',
    'TEMPLATE_PLACEHOLDERS',
    'validate_non_decreasing',
    # Progress
    'LevelStatus',
    'PlacementOutcome',
    'Transition',
    'ProgressCursor',
    'RoundSnapshot',
    'EngineSnapshot',
    # Profile
    'Child',
    'Preferences',
    'LoginResponse',
    'LoginRequest',
]
