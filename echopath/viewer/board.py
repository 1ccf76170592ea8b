"""
Board renderer - Sentence board display for the word-placement game.

Provides:
- Header (unit, lesson, level)
- Slot row with the active slot highlighted
- Word bank entries with stable keys (duplicate words allowed)
- Feedback and lesson-complete panels
"""

import html

from echopath.schemas import EngineSnapshot, RoundSnapshot

EMPTY_SLOT = "___"


def get_board_css() -> str:
    """Get CSS styles for the sentence board."""
    return """
    <style>
    .board-header { text-align: center; margin-bottom: 1em; }
    .board-unit { font-size: 0.95em; color: #666; }
    .board-lesson { font-size: 1.4em; font-weight: 600; }
    .board-level { font-size: 1.1em; color: #444; }
    .board-slots { display: flex; flex-wrap: wrap; gap: 0.6em; justify-content: center; }
    .board-slot {
        min-width: 4em;
        padding: 0.5em 0.8em;
        border: 2px dashed #bbb;
        border-radius: 10px;
        text-align: center;
        font-size: 1.2em;
    }
    .board-slot.active { border-color: #1976D2; border-style: solid; }
    .board-slot.filled { border-style: solid; border-color: #388E3C; background: #e8f5e9; }
    .board-feedback { text-align: center; margin: 1em 0; font-weight: 600; }
    .board-feedback.correct { color: #388E3C; }
    .board-feedback.incorrect { color: #e65100; }
    .board-complete { text-align: center; padding: 1.5em; }
    </style>
    """


def render_header(snapshot: EngineSnapshot) -> str:
    return (
        '<div class="board-header">'
        f'<div class="board-unit">{html.escape(snapshot.unit_title)}</div>'
        f'<div class="board-lesson">Lesson {snapshot.lesson_number}: '
        f'{html.escape(snapshot.lesson_name)}</div>'
        f'<div class="board-level">Level {snapshot.level_number}</div>'
        '</div>'
    )


def render_slots(round_state: RoundSnapshot) -> str:
    """
    Render the slot row.

    Filled slots show their word, the slot at slot_cursor is marked active,
    the rest show a blank.
    """
    parts = ['<div class="board-slots">']
    for index, word in enumerate(round_state.slots):
        classes = ["board-slot"]
        if word is not None:
            classes.append("filled")
        elif index == round_state.slot_cursor:
            classes.append("active")
        text = html.escape(word) if word is not None else EMPTY_SLOT
        parts.append(f'<div class="{" ".join(classes)}">{text}</div>')
    parts.append('</div>')
    return ''.join(parts)


def word_bank_entries(round_state: RoundSnapshot) -> list[tuple[str, str]]:
    """
    Word bank as (key, word) pairs.

    Keys stay unique when the sentence repeats a word, so each copy gets its
    own button.
    """
    return [(f"bank_{index}_{word}", word) for index, word in enumerate(round_state.word_bank)]


def render_feedback(feedback: str, success_message: str) -> str:
    if not feedback:
        return ""
    css_class = "correct" if feedback == success_message else "incorrect"
    return f'<div class="board-feedback {css_class}">{html.escape(feedback)}</div>'


def render_lesson_complete(lesson_name: str, has_next_lesson: bool) -> str:
    """Render the congratulations panel shown at the end of a lesson."""
    follow_up = "Continue to the next lesson!" if has_next_lesson else "You finished every lesson!"
    return f"""
    <div class="board-complete">
        <div style="font-size: 3em;">🎉</div>
        <h2>Congratulations!</h2>
        <p>You completed {html.escape(lesson_name)}!</p>
        <p>{follow_up}</p>
    </div>
    """
