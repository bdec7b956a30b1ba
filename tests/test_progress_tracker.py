from datetime import timedelta

from artikel_meister.services.progress_tracker import (
    update_progress, compute_mastered_set, categorize_words, progress_summary
)


def test_counters_and_skill_tracking(now):
    progress = update_progress({}, "Haus", True, article_correct=True, translation_correct=True, now=now)
    progress = update_progress(progress, "Haus", False, article_correct=False, translation_correct=True, now=now)
    progress = update_progress(progress, "Haus", True, now=now)

    entry = progress["Haus"]
    assert entry.total_seen == 3
    assert entry.correct_count == 2
    assert entry.article_attempts == 2
    assert entry.article_correct == 1
    assert entry.translation_attempts == 2
    assert entry.translation_correct == 2


def test_mastery_is_monotonic(now):
    progress = {}
    for _ in range(3):
        progress = update_progress(progress, "Haus", True, now=now)
    assert compute_mastered_set(progress, 3) == {"Haus"}

    progress = update_progress(progress, "Haus", False, now=now)
    progress = update_progress(progress, "Haus", False, now=now)
    assert compute_mastered_set(progress, 3) == {"Haus"}


def test_mastered_set_follows_threshold(now):
    progress = update_progress({}, "Haus", True, now=now)
    progress = update_progress(progress, "Buch", True, now=now)
    progress = update_progress(progress, "Buch", True, now=now)

    assert compute_mastered_set(progress, 1) == {"Haus", "Buch"}
    assert compute_mastered_set(progress, 2) == {"Buch"}
    assert compute_mastered_set(progress, 5) == set()


def test_categorize_and_summary(make_word, now):
    words = [make_word("Haus"), make_word("Buch"), make_word("Kind"), make_word("Auto")]
    progress = update_progress({}, "Haus", True, now=now)
    progress = update_progress(progress, "Haus", True, now=now)
    progress = update_progress(progress, "Buch", False, now=now - timedelta(days=1))

    categories = categorize_words(words, progress, 2)
    assert [w.german for w in categories.mastered] == ["Haus"]
    assert [w.german for w in categories.in_progress] == ["Buch"]
    assert [w.german for w in categories.not_started] == ["Kind", "Auto"]

    summary = progress_summary(words, progress, 2)
    assert summary.totalWords == 4
    assert summary.masteredCount == 1
    assert summary.inProgressCount == 1
    assert summary.notStartedCount == 2
    assert summary.completionPercentage == 25
    assert summary.daysStudied == 2
    assert summary.totalQuestions == 3


def test_summary_for_empty_word_list():
    summary = progress_summary([], {}, 3)
    assert summary.completionPercentage == 0
    assert summary.totalQuestions == 0
