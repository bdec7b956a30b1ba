import logging
from datetime import datetime
from typing import Optional

from artikel_meister.models.schemas import GameStats

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def new_game_stats(now: Optional[datetime] = None) -> GameStats:
    now = now or datetime.now()
    return GameStats(start_date=now, last_played=now)


def record_round(
    stats: GameStats,
    is_correct: bool,
    new_streak: int,
    article_correct: Optional[bool] = None,
    translation_correct: Optional[bool] = None,
    now: Optional[datetime] = None
) -> GameStats:
    """Добавляет результат раунда к накопленной статистике."""
    now = now or datetime.now()
    updated = stats.model_copy()

    updated.total_questions += 1
    updated.last_played = now

    if is_correct:
        updated.correct_answers += 1

    updated.current_streak = new_streak
    if new_streak > updated.best_streak:
        logger.info(f"New best streak: {new_streak}")
        updated.best_streak = new_streak

    if article_correct is not None:
        updated.articles_attempted += 1
        if article_correct:
            updated.articles_correct += 1

    if translation_correct is not None:
        updated.translations_attempted += 1
        if translation_correct:
            updated.translations_correct += 1

    return updated


def accuracy(correct: int, attempted: int) -> int:
    """Точность в процентах, 0 если попыток не было."""
    if attempted <= 0:
        return 0
    return round(correct / attempted * 100)
