# Учёт истории показов слова и серии правильных ответов.
# Статус "выучено" здесь не постоянный: первая же ошибка его снимает.

import logging
from datetime import datetime
from typing import Dict, Optional, Tuple

from artikel_meister.models.schemas import WordHistoryEntry

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

WordHistory = Dict[str, WordHistoryEntry]

STATE_UNSEEN = "unseen"
STATE_LEARNING = "learning"
STATE_MASTERED = "mastered"


def record_answer(
    history: WordHistory,
    german: str,
    is_correct: bool,
    mastery_threshold: int,
    now: Optional[datetime] = None
) -> Tuple[WordHistory, WordHistoryEntry]:
    """Обновляет историю слова после ответа и возвращает новую карту и запись."""
    now = now or datetime.now()
    new_history = dict(history)

    current = new_history.get(german)
    if current is None:
        entry = WordHistoryEntry(last_shown_at=now)
    else:
        entry = current.model_copy()

    entry.last_shown_at = now
    entry.times_shown += 1

    if is_correct:
        entry.consecutive_correct_count += 1
        entry.recently_incorrect = False
        if entry.consecutive_correct_count >= mastery_threshold:
            if not entry.is_mastered:
                logger.info(f"Word '{german}' mastered after {entry.consecutive_correct_count} correct answers in a row")
            entry.is_mastered = True
    else:
        if entry.is_mastered:
            logger.info(f"Word '{german}' lost mastered status")
        entry.consecutive_correct_count = 0
        entry.recently_incorrect = True
        entry.last_incorrect_at = now
        entry.is_mastered = False

    new_history[german] = entry
    return new_history, entry


def reset_mastered(history: WordHistory) -> WordHistory:
    """Возвращает все слова в ротацию: сбрасывает статус и серию."""
    return {
        german: entry.model_copy(update={"is_mastered": False, "consecutive_correct_count": 0})
        for german, entry in history.items()
    }


def word_state(entry: Optional[WordHistoryEntry], threshold: Optional[int] = None) -> str:
    """
    Состояние слова в ротации. Если передан порог, серия, уже достигшая его
    после смены настроек, тоже считается выученной.
    """
    if entry is None:
        return STATE_UNSEEN
    if entry.is_mastered:
        return STATE_MASTERED
    if threshold is not None and entry.consecutive_correct_count >= threshold:
        return STATE_MASTERED
    return STATE_LEARNING
