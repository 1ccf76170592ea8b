"""
RoundState - Word-placement puzzle for a single level.

Slots are filled strictly left to right: a word may only be dropped on the
slot at slot_cursor. The word bank is shuffled once per reset and tracks the
remaining target words as a multiset.
"""

import logging
import random
from typing import Optional

from echopath.config import DEFAULT_FAILURE_MESSAGE, DEFAULT_SUCCESS_MESSAGE
from echopath.schemas import LevelStatus, PlacementOutcome, RoundSnapshot

logger = logging.getLogger(__name__)


class RoundState:
    """
    Mutable per-level state.

    Invariants after every call:
    - slot_cursor == number of filled slots
    - word_bank holds exactly the target words of the still-empty slots
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        success_message: str = DEFAULT_SUCCESS_MESSAGE,
        failure_message: str = DEFAULT_FAILURE_MESSAGE,
    ):
        self.rng = rng or random.Random()
        self.success_message = success_message
        self.failure_message = failure_message
        self.target: list[str] = []
        self.word_bank: list[str] = []
        self.slots: list[Optional[str]] = []
        self.slot_cursor = 0
        self.feedback = ""

    @property
    def status(self) -> LevelStatus:
        if self.slot_cursor >= len(self.slots):
            return LevelStatus.COMPLETE
        return LevelStatus.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        return self.status == LevelStatus.COMPLETE

    def expected_word(self) -> Optional[str]:
        """Target word for the next slot, None once the round is complete."""
        if self.is_complete:
            return None
        return self.target[self.slot_cursor]

    def reset(self, level: list[str]):
        """Start the round over for the given target sentence."""
        self.target = list(level)
        self.slots = [None] * len(self.target)
        self.word_bank = list(self.target)
        self.rng.shuffle(self.word_bank)
        self.slot_cursor = 0
        self.feedback = ""
        logger.debug("Round reset: %d slot(s)", len(self.slots))

    def attempt_placement(self, word: str, at_slot: int) -> PlacementOutcome:
        """
        Try to drop a word on a slot.

        Args:
            word: The word being dropped
            at_slot: Index of the slot it was dropped on

        Returns:
            CORRECT if placed, INCORRECT if it was the wrong word for the
            expected slot, IGNORED if at_slot is not the expected slot (no
            state change, not even feedback)
        """
        if self.is_complete or at_slot != self.slot_cursor:
            return PlacementOutcome.IGNORED

        if word != self.target[at_slot]:
            self.feedback = self.failure_message
            return PlacementOutcome.INCORRECT

        self.slots[at_slot] = word
        if word in self.word_bank:
            self.word_bank.remove(word)  # one instance only; duplicates stay
        self.feedback = self.success_message
        self.slot_cursor += 1
        return PlacementOutcome.CORRECT

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            target=list(self.target),
            word_bank=list(self.word_bank),
            slots=list(self.slots),
            slot_cursor=self.slot_cursor,
            feedback=self.feedback,
            status=self.status,
        )
