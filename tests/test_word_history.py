from datetime import timedelta

from artikel_meister.services.word_history import (
    record_answer, reset_mastered, word_state, STATE_UNSEEN, STATE_LEARNING, STATE_MASTERED
)


def answer_sequence(answers, threshold, now):
    history = {}
    entry = None
    for step, is_correct in enumerate(answers):
        history, entry = record_answer(history, "Haus", is_correct, threshold, now=now + timedelta(minutes=step))
    return history, entry


def test_first_answer_creates_entry(now):
    history, entry = record_answer({}, "Haus", True, 3, now=now)

    assert history["Haus"] is entry
    assert entry.times_shown == 1
    assert entry.last_shown_at == now
    assert entry.consecutive_correct_count == 1
    assert not entry.is_mastered


def test_mastered_after_threshold_and_lost_on_miss(now):
    _, entry = answer_sequence([True, True, True], 3, now)
    assert entry.is_mastered
    assert entry.consecutive_correct_count == 3

    _, entry = answer_sequence([True, True, True, False], 3, now)
    assert not entry.is_mastered
    assert entry.consecutive_correct_count == 0
    assert entry.recently_incorrect
    assert entry.last_incorrect_at == now + timedelta(minutes=3)
    assert entry.times_shown == 4


def test_streak_must_be_consecutive(now):
    _, entry = answer_sequence([True, True, False, True, True], 3, now)
    assert not entry.is_mastered
    assert entry.consecutive_correct_count == 2
    assert entry.recently_incorrect is False


def test_input_history_is_not_mutated(now):
    history, _ = record_answer({}, "Haus", True, 3, now=now)
    updated, _ = record_answer(history, "Haus", False, 3, now=now)

    assert history["Haus"].consecutive_correct_count == 1
    assert updated["Haus"].consecutive_correct_count == 0


def test_reset_mastered_clears_status_and_streak(now):
    history, _ = answer_sequence([True, True, True], 3, now)
    reset = reset_mastered(history)

    assert not reset["Haus"].is_mastered
    assert reset["Haus"].consecutive_correct_count == 0
    assert reset["Haus"].times_shown == 3
    assert history["Haus"].is_mastered


def test_word_state(now):
    assert word_state(None) == STATE_UNSEEN
    _, entry = answer_sequence([True], 2, now)
    assert word_state(entry) == STATE_LEARNING
    _, entry = answer_sequence([True, True], 2, now)
    assert word_state(entry) == STATE_MASTERED


def test_word_state_with_lowered_threshold(now):
    _, entry = answer_sequence([True, True], 3, now)

    assert word_state(entry) == STATE_LEARNING
    assert word_state(entry, threshold=3) == STATE_LEARNING
    assert word_state(entry, threshold=2) == STATE_MASTERED
    assert word_state(None, threshold=2) == STATE_UNSEEN
