# matching.py
# Игра "найди пару": немецкие слова и переводы показываются в двух перемешанных колонках.
# Прогресс и история слов в этой игре не меняются.

import random
import logging
from typing import List, Optional, Tuple

from artikel_meister.models.config import CONFIG
from artikel_meister.models.schemas import VocabularyWord, MatchingPair, MatchingRound

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _pair_for(word: VocabularyWord, index: int) -> MatchingPair:
    return MatchingPair(
        id=f"pair-{index}",
        german=word.german,
        article=word.article,
        english=word.primary_translation,
    )


def matching_round(
    words: List[VocabularyWord],
    rng: Optional[random.Random] = None,
    size: int = CONFIG["MATCHING_PAIRS"]
) -> MatchingRound:
    """Случайные слова без повторов и два независимых порядка показа колонок."""
    rng = rng or random.Random()

    unique = []
    seen = set()
    for word in words:
        if word.key not in seen:
            seen.add(word.key)
            unique.append(word)

    chosen = rng.sample(unique, min(size, len(unique)))
    if len(chosen) < size:
        logger.warning(f"Only {len(chosen)} words available for matching round")

    pairs = [_pair_for(word, index) for index, word in enumerate(chosen)]
    german_order = [pair.id for pair in pairs]
    english_order = list(german_order)
    rng.shuffle(german_order)
    rng.shuffle(english_order)

    return MatchingRound(pairs=pairs, germanOrder=german_order, englishOrder=english_order)


def score_match(is_match: bool, streak: int) -> Tuple[int, int]:
    """
    Очки и новая серия после попытки сопоставления.
    Бонус считается по серии до этой попытки, ошибка обнуляет серию.
    """
    if not is_match:
        return 0, 0
    return CONFIG["POINTS_PER_CORRECT"] + streak * CONFIG["POINTS_PER_STREAK"], streak + 1
