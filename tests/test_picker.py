import random
from datetime import timedelta

import pytest

from artikel_meister.models.schemas import ProgressSettings, WordHistoryEntry
from artikel_meister.services.picker import (
    pool_weights, partition_pools, select_next, selection_stats
)


class FixedRandom(random.Random):
    """Генератор с заданным значением random() для детерминированной выборки."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def shown(now, ago, **kwargs):
    return WordHistoryEntry(last_shown_at=now - ago, times_shown=1, **kwargs)


def test_empty_word_list_returns_none(now):
    assert select_next([], {}, ProgressSettings(), now=now) is None


def test_single_unseen_word_is_returned(make_word, now):
    word = make_word("Haus")
    assert select_next([word], {}, ProgressSettings(), now=now, rng=random.Random(1)) == word


def test_all_mastered_with_feature_disabled_falls_back_to_available(make_word, now):
    words = [make_word("Haus"), make_word("Buch")]
    history = {
        w.german: shown(now, timedelta(days=30), consecutive_correct_count=3, is_mastered=True)
        for w in words
    }
    settings = ProgressSettings(mastered_words_enabled=False)

    pools = partition_pools(words, history, settings, now)
    assert pools.mastered == []

    for seed in range(10):
        assert select_next(words, history, settings, now=now, rng=random.Random(seed)) in words


def test_partition_assigns_each_word_to_one_pool(make_word, now):
    never = make_word("Haus")
    incorrect = make_word("Buch")
    expired_incorrect = make_word("Tisch", article="der")
    recent = make_word("Stuhl", article="der")
    fresh = make_word("Zeit", article="die")
    mastered_old = make_word("Jahr")
    mastered_new = make_word("Tag", article="der")

    history = {
        "Buch": shown(now, timedelta(hours=2), recently_incorrect=True,
                      last_incorrect_at=now - timedelta(hours=2)),
        "Tisch": shown(now, timedelta(hours=30), recently_incorrect=True,
                       last_incorrect_at=now - timedelta(hours=30)),
        "Stuhl": shown(now, timedelta(minutes=10)),
        "Zeit": shown(now, timedelta(days=2)),
        "Jahr": shown(now, timedelta(days=8), consecutive_correct_count=3, is_mastered=True),
        "Tag": shown(now, timedelta(days=1), consecutive_correct_count=3, is_mastered=True),
        "Gespenst": shown(now, timedelta(days=100)),
    }
    settings = ProgressSettings(mastered_words_enabled=True, mastered_words_reset_days=7)
    words = [never, incorrect, expired_incorrect, recent, fresh, mastered_old, mastered_new]

    pools = partition_pools(words, history, settings, now)

    assert pools.never_seen == [never]
    assert pools.incorrect == [incorrect]
    assert pools.recent == [recent]
    assert pools.fresh == [expired_incorrect, fresh]
    assert pools.mastered == [mastered_old]


def test_weights_at_slider_ends():
    variety = pool_weights(0)
    assert variety.incorrect == pytest.approx(0.15)
    assert variety.recent == 0
    assert variety.fresh == pytest.approx(0.4)
    assert variety.never_seen == pytest.approx(0.6)
    assert variety.mastered == 0

    repetition = pool_weights(100)
    assert repetition.incorrect == pytest.approx(5.15)
    assert repetition.recent == pytest.approx(2.0)
    assert repetition.fresh == pytest.approx(0.0)
    assert repetition.never_seen == pytest.approx(0.0)
    assert repetition.mastered == pytest.approx(0.5)


def test_weights_are_monotonic_in_preference():
    previous = pool_weights(0)
    for preference in range(1, 101):
        current = pool_weights(preference)
        assert current.incorrect >= previous.incorrect
        assert current.recent >= previous.recent
        assert current.mastered >= previous.mastered
        assert current.fresh <= previous.fresh
        assert current.never_seen <= previous.never_seen
        previous = current


def test_out_of_range_preference_is_clamped():
    assert pool_weights(-20) == pool_weights(0)
    assert pool_weights(250) == pool_weights(100)
    assert all(value >= 0 for value in pool_weights(250).model_dump().values())


def test_max_repetition_prefers_incorrect_words(make_word, now):
    incorrect = make_word("Buch")
    never = make_word("Haus")
    history = {
        "Buch": shown(now, timedelta(hours=1), recently_incorrect=True,
                      last_incorrect_at=now - timedelta(hours=1)),
    }
    settings = ProgressSettings(repetition_preference=100)

    for value in (0.0, 0.5, 0.999):
        assert select_next([never, incorrect], history, settings, now=now, rng=FixedRandom(value)) == incorrect


def test_zero_total_weight_picks_among_candidates(make_word, now):
    words = [make_word("Haus"), make_word("Buch")]
    settings = ProgressSettings(repetition_preference=100)
    assert select_next(words, {}, settings, now=now, rng=random.Random(3)) in words


def test_draw_past_total_weight_returns_last_candidate(make_word, now):
    incorrect = make_word("Buch")
    never = make_word("Haus")
    history = {
        "Buch": shown(now, timedelta(hours=1), recently_incorrect=True,
                      last_incorrect_at=now - timedelta(hours=1)),
    }
    settings = ProgressSettings(repetition_preference=50)

    # Кандидаты идут в порядке пулов: ошибки, недавние, свежие, новые, выученные
    assert select_next([never, incorrect], history, settings, now=now, rng=FixedRandom(2.0)) == never


def test_variety_setting_favours_unseen_words(make_word, now):
    incorrect = make_word("Buch")
    never = make_word("Haus")
    history = {
        "Buch": shown(now, timedelta(hours=1), recently_incorrect=True,
                      last_incorrect_at=now - timedelta(hours=1)),
    }
    settings = ProgressSettings(repetition_preference=0)
    rng = random.Random(42)

    picks = [select_next([incorrect, never], history, settings, now=now, rng=rng) for _ in range(1000)]

    assert picks.count(never) > picks.count(incorrect)
    assert picks.count(incorrect) > 0


def test_selection_stats_counts_all_mastered_words(make_word, now):
    words = [make_word("Haus"), make_word("Buch"), make_word("Kind")]
    history = {
        "Buch": shown(now, timedelta(days=1), consecutive_correct_count=3, is_mastered=True),
        "Kind": shown(now, timedelta(minutes=5)),
    }

    stats = selection_stats(words, history, now=now)

    assert stats.never == 1
    assert stats.mastered == 1
    assert stats.recent == 1
    assert stats.incorrect == 0
    assert stats.fresh == 0
