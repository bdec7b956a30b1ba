import random
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from artikel_meister.models.config import CONFIG, POOL_WEIGHTS
from artikel_meister.models.schemas import (
    VocabularyWord, WordHistoryEntry, ProgressSettings, PoolWeights, WordPools, SelectionStats
)

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

POOL_ORDER = ["incorrect", "recent", "fresh", "never_seen", "mastered"]


def pool_weights(repetition_preference: int) -> PoolWeights:
    """
    Рассчитывает вес одного слова в каждом пуле по настройке "повторение/разнообразие".

    Пулы повторения растут с квадратом p, поэтому сильнее всего влияют у правого
    края ползунка. Пулы разнообразия убывают как корень из (1 - p) и не исчезают
    при средних значениях. При p в [0, 1] все веса неотрицательны.
    """
    preference = min(max(repetition_preference, 0), 100) / 100
    repetition_factor = preference ** 2
    variety_factor = (1 - preference) ** 0.5

    def weight(pool: str, factor: float) -> float:
        base, multiplier = POOL_WEIGHTS[pool]
        return base + factor * multiplier

    return PoolWeights(
        incorrect=weight("incorrect", repetition_factor),
        recent=weight("recent", repetition_factor),
        fresh=weight("fresh", variety_factor),
        never_seen=weight("never_seen", variety_factor),
        mastered=weight("mastered", repetition_factor),
    )


def _is_recently_incorrect(entry: WordHistoryEntry, now: datetime) -> bool:
    if not entry.recently_incorrect or entry.last_incorrect_at is None:
        return False
    return now - entry.last_incorrect_at < timedelta(hours=CONFIG["RECENT_INCORRECT_HOURS"])


def _is_recently_shown(entry: WordHistoryEntry, now: datetime) -> bool:
    return now - entry.last_shown_at < timedelta(minutes=CONFIG["RECENTLY_SHOWN_MINUTES"])


def partition_pools(
    available_words: List[VocabularyWord],
    history: Dict[str, WordHistoryEntry],
    settings: ProgressSettings,
    now: datetime
) -> WordPools:
    """Раскладывает слова по пяти непересекающимся пулам."""
    pools = WordPools()
    reset_age = timedelta(days=settings.mastered_words_reset_days)

    for word in available_words:
        entry = history.get(word.german)

        if entry is None:
            pools.never_seen.append(word)
            continue

        # Выученные слова участвуют только после паузы и при включённой настройке
        if entry.is_mastered:
            if settings.mastered_words_enabled and now - entry.last_shown_at >= reset_age:
                pools.mastered.append(word)
            continue

        if _is_recently_incorrect(entry, now):
            pools.incorrect.append(word)
        elif _is_recently_shown(entry, now):
            pools.recent.append(word)
        else:
            pools.fresh.append(word)

    return pools


def _weighted_candidates(pools: WordPools, weights: PoolWeights) -> List[Tuple[VocabularyWord, float]]:
    candidates = []
    for pool in POOL_ORDER:
        pool_weight = getattr(weights, pool)
        for word in getattr(pools, pool):
            candidates.append((word, pool_weight))
    return candidates


def select_next(
    available_words: List[VocabularyWord],
    history: Dict[str, WordHistoryEntry],
    settings: ProgressSettings,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> Optional[VocabularyWord]:
    """Выбирает следующее слово взвешенной случайной выборкой по пулам."""
    if not available_words:
        logger.warning("No available words to select from")
        return None

    now = now or datetime.now()
    rng = rng or random.Random()

    pools = partition_pools(available_words, history, settings, now)
    weights = pool_weights(settings.repetition_preference)
    candidates = _weighted_candidates(pools, weights)

    if not candidates:
        logger.warning(f"No eligible words among {len(available_words)}, using uniform fallback")
        return rng.choice(available_words)

    total_weight = sum(weight for _, weight in candidates)
    if total_weight <= 0:
        logger.warning("All pool weights are zero, picking uniformly among candidates")
        return rng.choice(candidates)[0]

    remainder = rng.random() * total_weight
    for word, weight in candidates:
        remainder -= weight
        if remainder <= 0:
            return word

    # Погрешность округления: берём последнего кандидата
    return candidates[-1][0]


def selection_stats(
    available_words: List[VocabularyWord],
    history: Dict[str, WordHistoryEntry],
    now: Optional[datetime] = None
) -> SelectionStats:
    """Считает слова по категориям для отображения. Выученные считаются все, без учёта паузы."""
    now = now or datetime.now()
    stats = SelectionStats()

    for word in available_words:
        entry = history.get(word.german)
        if entry is None:
            stats.never += 1
        elif entry.is_mastered:
            stats.mastered += 1
        elif _is_recently_incorrect(entry, now):
            stats.incorrect += 1
        elif _is_recently_shown(entry, now):
            stats.recent += 1
        else:
            stats.fresh += 1

    return stats
