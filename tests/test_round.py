"""Tests for RoundState (word placement)."""

import random
from collections import Counter

import pytest

from echopath.classroom import DEFAULT_FAILURE_MESSAGE, DEFAULT_SUCCESS_MESSAGE, RoundState
from echopath.schemas import LevelStatus, PlacementOutcome

SENTENCE = ["The", "big", "dog", "runs"]


def new_round(level, seed=3):
    round_state = RoundState(rng=random.Random(seed))
    round_state.reset(level)
    return round_state


def assert_invariants(round_state):
    filled = [word for word in round_state.slots if word is not None]
    assert round_state.slot_cursor == len(filled)
    remaining = [
        target for target, slot in zip(round_state.target, round_state.slots) if slot is None
    ]
    assert Counter(round_state.word_bank) == Counter(remaining)


class TestReset:
    """Starting a round."""

    def test_reset_state(self):
        round_state = new_round(SENTENCE)
        assert round_state.slots == [None] * 4
        assert sorted(round_state.word_bank) == sorted(SENTENCE)
        assert round_state.slot_cursor == 0
        assert round_state.feedback == ""
        assert round_state.status == LevelStatus.IN_PROGRESS

    def test_reset_does_not_alias_level(self):
        level = list(SENTENCE)
        round_state = new_round(level)
        level.append("fast")
        assert len(round_state.slots) == 4
        assert round_state.target == SENTENCE

    def test_empty_level(self):
        round_state = new_round([])
        assert round_state.slots == []
        assert round_state.word_bank == []
        assert round_state.slot_cursor == 0
        assert round_state.is_complete
        assert round_state.attempt_placement("Dog", 0) == PlacementOutcome.IGNORED

    def test_reset_restores_bank(self):
        round_state = new_round(SENTENCE)
        for index, word in enumerate(SENTENCE[:3]):
            round_state.attempt_placement(word, index)
        round_state.reset(SENTENCE)
        assert Counter(round_state.word_bank) == Counter(SENTENCE)
        assert round_state.slots == [None] * 4
        assert round_state.slot_cursor == 0
        assert round_state.feedback == ""

    def test_shuffle_is_seeded(self):
        assert new_round(SENTENCE, seed=11).word_bank == new_round(SENTENCE, seed=11).word_bank

    def test_bank_not_reshuffled_mid_round(self):
        round_state = new_round(SENTENCE)
        before = list(round_state.word_bank)
        round_state.attempt_placement("wrong", 0)
        assert round_state.word_bank == before
        round_state.attempt_placement("The", 0)
        assert round_state.word_bank == [word for word in before if word != "The"]


class TestPlacement:
    """Dropping words on slots."""

    def test_full_round(self):
        round_state = new_round(SENTENCE)
        for index, word in enumerate(SENTENCE):
            assert round_state.attempt_placement(word, index) == PlacementOutcome.CORRECT
            assert_invariants(round_state)
        assert round_state.slot_cursor == 4
        assert round_state.word_bank == []
        assert round_state.slots == SENTENCE
        assert round_state.feedback == DEFAULT_SUCCESS_MESSAGE
        assert round_state.status == LevelStatus.COMPLETE
        assert round_state.expected_word() is None

    def test_wrong_word(self):
        round_state = new_round(SENTENCE)
        bank = list(round_state.word_bank)
        assert round_state.attempt_placement("big", 0) == PlacementOutcome.INCORRECT
        assert round_state.feedback == DEFAULT_FAILURE_MESSAGE
        assert round_state.slots == [None] * 4
        assert round_state.word_bank == bank
        assert round_state.slot_cursor == 0

    def test_repeated_wrong_attempts_same_outcome(self):
        round_state = new_round(SENTENCE)
        for _ in range(3):
            assert round_state.attempt_placement("runs", 0) == PlacementOutcome.INCORRECT
            assert round_state.slot_cursor == 0
            assert round_state.feedback == DEFAULT_FAILURE_MESSAGE

    def test_out_of_order_ignored(self):
        round_state = new_round(["Big", "dog"])
        bank = list(round_state.word_bank)
        assert round_state.attempt_placement("dog", 1) == PlacementOutcome.IGNORED
        assert round_state.slots == [None, None]
        assert round_state.word_bank == bank
        assert round_state.slot_cursor == 0
        assert round_state.feedback == ""

    def test_out_of_order_keeps_previous_feedback(self):
        round_state = new_round(SENTENCE)
        round_state.attempt_placement("dog", 0)
        round_state.attempt_placement("The", 3)
        assert round_state.feedback == DEFAULT_FAILURE_MESSAGE

    def test_correct_word_twice_fails_second_time(self):
        round_state = new_round(SENTENCE)
        assert round_state.attempt_placement("The", 0) == PlacementOutcome.CORRECT
        assert round_state.attempt_placement("The", 0) == PlacementOutcome.IGNORED
        assert round_state.slot_cursor == 1

    @pytest.mark.parametrize("slot", [-1, 4, 99])
    def test_invalid_slot_index(self, slot):
        round_state = new_round(SENTENCE)
        assert round_state.attempt_placement("The", slot) == PlacementOutcome.IGNORED
        assert_invariants(round_state)

    def test_placement_after_complete_ignored(self):
        round_state = new_round(["Dog"])
        round_state.attempt_placement("Dog", 0)
        assert round_state.attempt_placement("Dog", 1) == PlacementOutcome.IGNORED
        assert round_state.slots == ["Dog"]

    def test_case_sensitive_match(self):
        round_state = new_round(["Big", "dog"])
        assert round_state.attempt_placement("big", 0) == PlacementOutcome.INCORRECT


class TestDuplicates:
    """Repeated words are tracked as a multiset."""

    def test_duplicate_word_removed_once(self):
        level = ["a", "cat", "and", "a", "dog"]
        round_state = new_round(level)
        round_state.attempt_placement("a", 0)
        assert Counter(round_state.word_bank) == Counter(["cat", "and", "a", "dog"])
        for index in range(1, 5):
            round_state.attempt_placement(level[index], index)
            assert_invariants(round_state)
        assert round_state.word_bank == []
        assert round_state.is_complete

    def test_random_attempts_keep_invariants(self):
        level = ["The", "small", "dog", "plays", "with", "a", "ball", "and", "a", "toy"]
        round_state = new_round(level)
        rng = random.Random(42)
        vocabulary = level + ["cat", "runs"]
        for _ in range(300):
            round_state.attempt_placement(rng.choice(vocabulary), rng.randrange(-1, len(level) + 1))
            assert_invariants(round_state)


class TestSnapshot:
    """Read-only view for front ends."""

    def test_snapshot_is_a_copy(self):
        round_state = new_round(SENTENCE)
        snap = round_state.snapshot()
        round_state.attempt_placement("The", 0)
        assert snap.slot_cursor == 0
        assert snap.slots == [None] * 4
        assert round_state.snapshot().slots[0] == "The"

    def test_custom_messages(self):
        round_state = RoundState(rng=random.Random(1), success_message="Yay!", failure_message="Oops")
        round_state.reset(["Dog"])
        round_state.attempt_placement("Cat", 0)
        assert round_state.feedback == "Oops"
        round_state.attempt_placement("Dog", 0)
        assert round_state.feedback == "Yay!"
