"""
Curriculum builder - Turn a theme (the chosen animal) into a curriculum.

Provides:
- Default lesson content (one unit, three lessons, five levels each)
- Placeholder substitution ({Theme} / {theme}) per token
- build_curriculum(): deterministic, never fails for any theme string
"""

import logging
from typing import Optional

from echopath.schemas import (
    Curriculum,
    Lesson,
    LessonTemplate,
    Level,
    Unit,
    UnitTemplate,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Default content
# -----------------------------------------------------------------------------

DEFAULT_UNIT_TITLE = "My Animal Friend"

DEFAULT_TEMPLATES: list[UnitTemplate] = [
    UnitTemplate(
        title=DEFAULT_UNIT_TITLE,
        lessons=[
            LessonTemplate(
                name="Basic Actions",
                motif="action",
                levels=[
                    ["{Theme}"],
                    ["Big", "{theme}"],
                    ["The", "big", "{theme}", "runs"],
                    ["The", "big", "{theme}", "runs", "and", "eats"],
                    ["The", "big", "{theme}", "runs", "and", "eats", "a", "bone"],
                ],
            ),
            LessonTemplate(
                name="Emotions",
                motif="emotion",
                levels=[
                    ["{Theme}"],
                    ["Happy", "{theme}"],
                    ["The", "happy", "{theme}", "jumps"],
                    ["The", "happy", "{theme}", "jumps", "and", "wags", "tail"],
                    ["The", "happy", "{theme}", "jumps", "and", "wags", "tail", "fast"],
                ],
            ),
            LessonTemplate(
                name="Interactions",
                motif="interaction",
                levels=[
                    ["{Theme}"],
                    ["Small", "{theme}"],
                    ["The", "small", "{theme}", "plays"],
                    ["The", "small", "{theme}", "plays", "with", "a", "ball"],
                    ["The", "small", "{theme}", "plays", "with", "a", "ball", "and", "toy"],
                ],
            ),
        ],
    ),
]


# -----------------------------------------------------------------------------
# Building
# -----------------------------------------------------------------------------

def fill_token(token: str, theme: str) -> str:
    """Substitute theme placeholders in a single template token."""
    return token.format(Theme=theme, theme=theme.lower())


def build_lesson(template: LessonTemplate, theme: str) -> Lesson:
    return Lesson(
        name=template.name,
        motif=template.motif,
        levels=[
            Level(words=[fill_token(token, theme) for token in tokens])
            for tokens in template.levels
        ],
    )


def build_curriculum(
    theme: str,
    templates: Optional[list[UnitTemplate]] = None,
) -> Curriculum:
    """
    Build the curriculum for a theme.

    Args:
        theme: Display name of the chosen animal (any string; used as-is for
            stand-alone tokens, lower-cased inside sentences)
        templates: Unit templates to fill in (default: DEFAULT_TEMPLATES)

    Returns:
        Immutable Curriculum. The same theme always yields the same tree.
    """
    unit_templates = templates or DEFAULT_TEMPLATES
    units = [
        Unit(
            title=unit.title,
            lessons=[build_lesson(lesson, theme) for lesson in unit.lessons],
        )
        for unit in unit_templates
    ]
    curriculum = Curriculum(theme=theme, units=units)
    logger.debug(
        "Built curriculum for %r: %d unit(s), %d lesson(s)",
        theme,
        len(units),
        sum(len(unit.lessons) for unit in units),
    )
    return curriculum
