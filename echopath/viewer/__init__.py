"""
EchoPath Viewer - Rendering helpers for the sentence board.

This module provides:
- Board CSS and header rendering
- Slot row and word bank display
- Feedback and lesson-complete panels
"""

from .board import (
    get_board_css,
    render_header,
    render_slots,
    word_bank_entries,
    render_feedback,
    render_lesson_complete,
    EMPTY_SLOT,
)

__all__ = [
    "get_board_css",
    "render_header",
    "render_slots",
    "word_bank_entries",
    "render_feedback",
    "render_lesson_complete",
    "EMPTY_SLOT",
]
