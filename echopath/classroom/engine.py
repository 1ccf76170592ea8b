"""
GameEngine - One game session: curriculum, progression and the current round.

Ties the pieces together:
- builds the curriculum once from the theme
- resets the round whenever the navigator moves to a new level
- bumps a version counter and emits events on every visible change

All mutators take the session lock, so a multi-threaded host can share one
engine per session without further locking.
"""

import logging
import random
from threading import RLock
from typing import Optional

from echopath.config import GameSettings
from echopath.schemas import (
    EngineSnapshot,
    PlacementOutcome,
    ProgressCursor,
    Transition,
    UnitTemplate,
)

from . import events
from .builder import build_curriculum
from .events import EventBus
from .progression import Navigator
from .round import RoundState

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Sentence-building game for one player and one theme.

    Front ends read state (or snapshot()) and call attempt_placement(),
    advance()/skip() and reset() in response to player actions. None of
    these raise.
    """

    def __init__(
        self,
        theme: str,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        templates: Optional[list[UnitTemplate]] = None,
    ):
        """
        Initialize a session.

        Args:
            theme: Chosen animal name (e.g. from the child's profile)
            settings: Feedback text and shuffle seed (default: GameSettings())
            rng: Random source for word-bank shuffles (default: seeded from settings)
            templates: Alternative curriculum content
        """
        self.settings = settings or GameSettings()
        self.theme = theme
        self.curriculum = build_curriculum(theme, templates)
        self.navigator = Navigator(self.curriculum)
        self.round = RoundState(
            rng=rng or random.Random(self.settings.shuffle_seed),
            success_message=self.settings.success_message,
            failure_message=self.settings.failure_message,
        )
        self.events = EventBus()
        self.version = 0
        self._lock = RLock()
        self.round.reset(self.navigator.current_level())
        logger.info("Game session started for theme %r", theme)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    # Reads take the session lock too, so they never see a half-applied advance.

    @property
    def cursor(self) -> ProgressCursor:
        with self._lock:
            return self.navigator.cursor

    def current_level(self) -> list[str]:
        with self._lock:
            return self.navigator.current_level()

    def current_lesson_name(self) -> str:
        with self._lock:
            return self.navigator.current_lesson_name()

    def is_last_level_in_lesson(self) -> bool:
        with self._lock:
            return self.navigator.is_last_level_in_lesson()

    def is_last_lesson_in_unit(self) -> bool:
        with self._lock:
            return self.navigator.is_last_lesson_in_unit()

    def has_next(self) -> bool:
        with self._lock:
            return self.navigator.has_next()

    def is_level_complete(self) -> bool:
        with self._lock:
            return self.round.is_complete

    def snapshot(self) -> EngineSnapshot:
        with self._lock:
            cursor = self.navigator.cursor
            return EngineSnapshot(
                theme=self.theme,
                cursor=cursor,
                unit_title=self.navigator.current_unit_title(),
                lesson_name=self.navigator.current_lesson_name(),
                lesson_number=cursor.lesson_index + 1,
                level_number=cursor.level_index + 1,
                has_next=self.navigator.has_next(),
                next_action_label=self.navigator.next_action_label(),
                round=self.round.snapshot(),
                version=self.version,
            )

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def attempt_placement(self, word: str, at_slot: int) -> PlacementOutcome:
        """Drop a word on a slot; ignored placements change nothing."""
        with self._lock:
            outcome = self.round.attempt_placement(word, at_slot)
            if outcome == PlacementOutcome.IGNORED:
                logger.debug("Ignored placement of %r at slot %d", word, at_slot)
                return outcome
            self.version += 1
            self.events.emit(events.PLACEMENT, outcome=outcome, word=word, at_slot=at_slot)
            return outcome

    def advance(self) -> Transition:
        """
        Move to the next level and start a fresh round for it.

        At the final level this is a no-op: the cursor stays put and the
        round is left untouched.
        """
        with self._lock:
            previous = self.navigator.cursor
            previous_lesson = self.navigator.current_lesson_name()
            transition = self.navigator.advance()
            if transition == Transition.NONE:
                return transition

            self._reset_round()
            self.events.emit(
                events.LEVEL_CHANGED,
                transition=transition,
                previous=previous,
                cursor=self.navigator.cursor,
            )
            if transition in (Transition.LESSON, Transition.UNIT):
                self.events.emit(
                    events.LESSON_COMPLETED,
                    lesson_name=previous_lesson,
                    cursor=previous,
                )
            return transition

    def skip(self) -> Transition:
        """Skip the current level without finishing it."""
        return self.advance()

    def reset(self):
        """Replay the current level from scratch (new shuffle)."""
        with self._lock:
            self._reset_round()

    def _reset_round(self):
        self.round.reset(self.navigator.current_level())
        self.version += 1
        self.events.emit(
            events.ROUND_RESET,
            cursor=self.navigator.cursor,
            words=list(self.round.target),
        )
