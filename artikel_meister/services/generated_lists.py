# Приём списков слов от внешнего сервиса генерации.
# Неполные записи отбрасываются здесь, до того как попадут в словарь.

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from artikel_meister.models.config import CONFIG, ARTICLES
from artikel_meister.models.messages import RESULT_MESSAGES
from artikel_meister.models.schemas import VocabularyWord

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _is_valid_entry(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    german = raw.get("german")
    word_class = raw.get("type")
    english = raw.get("english")
    return (
        isinstance(german, str) and bool(german.strip())
        and isinstance(word_class, str) and bool(word_class.strip())
        and isinstance(english, list) and len(english) > 0
    )


def clean_generated_words(raw_words: List[Any]) -> List[VocabularyWord]:
    """Проверяет записи от генератора и превращает их в слова словаря."""
    words = []
    seen = set()

    for index, raw in enumerate(raw_words):
        if not _is_valid_entry(raw):
            logger.info(f"Filtering out invalid word at index {index}: {raw}")
            continue

        german = raw["german"].strip()
        if german.lower() in seen:
            continue

        article = raw.get("article")
        if not isinstance(article, str) or article not in ARTICLES:
            article = None

        english = [str(item).strip() for item in raw["english"] if str(item).strip()]
        if not english:
            logger.info(f"Filtering out word without translations at index {index}: {raw}")
            continue

        try:
            word = VocabularyWord(
                german=german,
                article=article,
                word_class=raw["type"].strip(),
                english_translations=english,
                difficulty=raw.get("difficulty") if isinstance(raw.get("difficulty"), str) else None,
            )
        except ValidationError as e:
            logger.warning(f"Skipping word at index {index}: {e}")
            continue

        seen.add(german.lower())
        words.append(word)

    dropped = len(raw_words) - len(words)
    if dropped:
        logger.info(f"Dropped {dropped} invalid or duplicate words from generated list")
    return words


def clamp_requested_count(count: Optional[int]) -> int:
    if count is None:
        return CONFIG["GENERATION_COUNT_DEFAULT"]
    return max(CONFIG["GENERATION_COUNT_MIN"], min(CONFIG["GENERATION_COUNT_MAX"], count))


def generation_timeout(count: int) -> float:
    """Таймаут запроса к генератору в секундах: растёт с количеством слов от 35 до 50."""
    count = clamp_requested_count(count)
    low, high = CONFIG["GENERATION_COUNT_MIN"], CONFIG["GENERATION_COUNT_MAX"]
    base, cap = CONFIG["GENERATION_TIMEOUT_BASE"], CONFIG["GENERATION_TIMEOUT_MAX"]
    return base + (cap - base) * (count - low) / (high - low)


def partial_warning(requested: int, received: int) -> Optional[str]:
    if received >= requested:
        return None
    return RESULT_MESSAGES["partial_result"].format(received, requested)
