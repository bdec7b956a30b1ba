import logging
from datetime import datetime
from typing import Dict, List, Optional, Set

from artikel_meister.models.schemas import (
    VocabularyWord, WordProgressEntry, WordCategories, ProgressSummary
)

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

WordProgress = Dict[str, WordProgressEntry]


def update_progress(
    progress: WordProgress,
    german: str,
    is_correct: bool,
    article_correct: Optional[bool] = None,
    translation_correct: Optional[bool] = None,
    now: Optional[datetime] = None
) -> WordProgress:
    """Увеличивает счётчики слова. Навыки учитываются, только если переданы."""
    now = now or datetime.now()
    new_progress = dict(progress)

    current = new_progress.get(german)
    entry = current.model_copy() if current is not None else WordProgressEntry(last_seen_at=now)

    entry.total_seen += 1
    entry.last_seen_at = now

    if is_correct:
        entry.correct_count += 1

    if article_correct is not None:
        entry.article_attempts += 1
        if article_correct:
            entry.article_correct += 1

    if translation_correct is not None:
        entry.translation_attempts += 1
        if translation_correct:
            entry.translation_correct += 1

    new_progress[german] = entry
    return new_progress


def compute_mastered_set(progress: WordProgress, threshold: int) -> Set[str]:
    """Слово выучено, если набрало threshold правильных ответов за всё время."""
    return {german for german, entry in progress.items() if entry.correct_count >= threshold}


def categorize_words(words: List[VocabularyWord], progress: WordProgress, threshold: int) -> WordCategories:
    categories = WordCategories()
    for word in words:
        entry = progress.get(word.german)
        if entry is None:
            categories.not_started.append(word)
        elif entry.correct_count >= threshold:
            categories.mastered.append(word)
        else:
            categories.in_progress.append(word)
    return categories


def progress_summary(words: List[VocabularyWord], progress: WordProgress, threshold: int) -> ProgressSummary:
    """
    Сводка для страницы прогресса. Выученные и начатые слова считаются
    по всей карте прогресса, а не только по активным спискам.
    """
    total_words = len(words)
    mastered_count = len(compute_mastered_set(progress, threshold))
    started_count = len(progress)

    completion = round(mastered_count / total_words * 100) if total_words else 0
    days_studied = len({entry.last_seen_at.date() for entry in progress.values()})
    total_questions = sum(entry.total_seen for entry in progress.values())

    return ProgressSummary(
        totalWords=total_words,
        masteredCount=mastered_count,
        inProgressCount=started_count - mastered_count,
        notStartedCount=max(total_words - started_count, 0),
        completionPercentage=completion,
        daysStudied=days_studied,
        totalQuestions=total_questions,
    )
