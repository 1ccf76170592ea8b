"""
EchoPath - Sentence Builder

Streamlit front end for the sentence-building game. Players pick an animal
friend, then build sentences word by word, level by level.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
import yaml

from echopath.classroom import GameEngine
from echopath.config import GameSettings, load_settings
from echopath.utils import load_lesson_templates
from echopath.viewer import (
    get_board_css,
    render_header,
    render_slots,
    word_bank_entries,
    render_feedback,
    render_lesson_complete,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="EchoPath",
    page_icon="🐾",
    layout="wide",
    initial_sidebar_state="expanded",
)

logger = logging.getLogger(__name__)


def load_app_settings() -> GameSettings:
    """Load settings, falling back to defaults if the config is broken."""
    try:
        return load_settings()
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        st.error(f"Could not load settings, using defaults: {e}")
        return GameSettings()


def load_app_templates(settings: GameSettings):
    """Load alternative lesson content if configured (None -> built-in content)."""
    if not settings.lesson_templates_path:
        return None
    try:
        return load_lesson_templates(settings.lesson_templates_path)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        st.error(f"Could not load lesson content, using built-in lessons: {e}")
        return None


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "settings" not in st.session_state:
        settings = load_app_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s - %(levelname)s - %(message)s"
        )
        st.session_state.settings = settings
        st.session_state.templates = load_app_templates(settings)

    if "engine" not in st.session_state:
        st.session_state.engine = None  # created once an animal is picked


def start_game(theme: str):
    """Start a new session for the chosen animal."""
    st.session_state.engine = GameEngine(
        theme,
        settings=st.session_state.settings,
        templates=st.session_state.templates,
    )
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Animal Picker
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the animal picker and current position."""
    settings = st.session_state.settings
    st.sidebar.title("🐾 EchoPath")

    st.sidebar.subheader("What is your favorite animal?")
    animals = settings.animals
    default_index = animals.index(settings.default_theme) if settings.default_theme in animals else 0
    animal = st.sidebar.radio(
        "Animal",
        animals,
        index=default_index,
        horizontal=True,
        label_visibility="collapsed",
    )
    if st.sidebar.button("Start", type="primary", use_container_width=True):
        start_game(animal)

    engine = st.session_state.engine
    if engine:
        st.sidebar.divider()
        snapshot = engine.snapshot()
        st.sidebar.markdown(f"**Friend:** {snapshot.theme}")
        st.sidebar.markdown(f"**{snapshot.unit_title}**")
        lesson_names = engine.curriculum.lesson_names(snapshot.cursor.unit_index)
        for idx, name in enumerate(lesson_names):
            marker = "→" if idx == snapshot.cursor.lesson_index else "○"
            st.sidebar.markdown(f"{marker} Lesson {idx + 1}: {name}")


# -----------------------------------------------------------------------------
# Main Content: Sentence Board
# -----------------------------------------------------------------------------

def render_board():
    """Render the sentence board for the current level."""
    engine = st.session_state.engine
    if not engine:
        st.info("Pick an animal friend in the sidebar to begin.")
        return

    snapshot = engine.snapshot()
    round_state = snapshot.round

    st.markdown(get_board_css(), unsafe_allow_html=True)
    st.markdown(render_header(snapshot), unsafe_allow_html=True)
    st.markdown(render_slots(round_state), unsafe_allow_html=True)
    st.markdown(
        render_feedback(round_state.feedback, engine.settings.success_message),
        unsafe_allow_html=True,
    )

    render_word_bank(engine)

    if engine.is_level_complete() and engine.is_last_level_in_lesson():
        st.markdown(
            render_lesson_complete(snapshot.lesson_name, snapshot.has_next),
            unsafe_allow_html=True,
        )

    render_controls(engine)


def render_word_bank(engine: GameEngine):
    """One button per remaining word; clicking drops it on the next slot."""
    entries = word_bank_entries(engine.round.snapshot())
    if not entries:
        return

    st.divider()
    columns = st.columns(len(entries))
    for column, (key, word) in zip(columns, entries):
        with column:
            if st.button(word, key=key, use_container_width=True):
                engine.attempt_placement(word, engine.round.slot_cursor)
                st.rerun()


def render_controls(engine: GameEngine):
    """Next / skip / reset buttons."""
    st.divider()
    col1, col2, col3 = st.columns(3)

    with col1:
        if engine.is_level_complete():
            label = engine.navigator.next_action_label()
            if st.button(label, type="primary", use_container_width=True, disabled=not engine.has_next()):
                engine.advance()
                st.rerun()

    with col2:
        if st.button("Skip Level", use_container_width=True):
            engine.skip()
            st.rerun()

    with col3:
        if st.button("Reset Level", use_container_width=True):
            engine.reset()
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_board()


if __name__ == "__main__":
    main()
