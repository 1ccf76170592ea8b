"""EchoPath utilities."""

from .content_loader import load_lesson_templates, get_available_content, CONTENT_DIR

__all__ = ["load_lesson_templates", "get_available_content", "CONTENT_DIR"]
