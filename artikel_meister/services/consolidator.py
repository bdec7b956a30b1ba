import random
import string
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from artikel_meister.models.config import CONFIG
from artikel_meister.models.messages import RESULT_MESSAGES
from artikel_meister.models.schemas import (
    VocabularyWord, CustomWordList, ListSelectionSettings, ActiveListsInfo
)

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def _unique_by_german(words: List[VocabularyWord]) -> List[VocabularyWord]:
    """Оставляет первое вхождение каждого слова (без учёта регистра)."""
    seen = set()
    unique = []
    for word in words:
        if word.key in seen:
            continue
        seen.add(word.key)
        unique.append(word)
    return unique


def consolidate(
    built_in: List[VocabularyWord],
    custom_lists: List[CustomWordList],
    settings: ListSelectionSettings
) -> List[VocabularyWord]:
    """Собирает рабочий словарь из встроенного списка и активных пользовательских списков."""
    all_words: List[VocabularyWord] = []

    if settings.include_built_in:
        all_words.extend(built_in)

    # Списки берутся в порядке хранения, а не в порядке включения
    active_ids = set(settings.active_list_ids)
    for custom_list in custom_lists:
        if custom_list.id in active_ids:
            all_words.extend(custom_list.words)

    unique_words = _unique_by_german(all_words)
    if len(unique_words) != len(all_words):
        logger.info(f"Dropped {len(all_words) - len(unique_words)} duplicate words during consolidation")
    return unique_words


def active_lists_info(
    built_in: List[VocabularyWord],
    custom_lists: List[CustomWordList],
    settings: ListSelectionSettings
) -> ActiveListsInfo:
    """Возвращает названия активных списков и общее количество слов в них."""
    total_words = 0
    active_list_names = []

    if settings.include_built_in:
        built_in_count = len(_unique_by_german(built_in))
        active_list_names.append(RESULT_MESSAGES["built_in_list"].format(built_in_count))
        total_words += built_in_count

    active_ids = set(settings.active_list_ids)
    for custom_list in custom_lists:
        if custom_list.id in active_ids:
            active_list_names.append(custom_list.display_name)
            total_words += custom_list.word_count

    return ActiveListsInfo(totalWords=total_words, activeListNames=active_list_names)


def _new_list_id(now: datetime, rng: random.Random) -> str:
    suffix = "".join(rng.choice(_ID_ALPHABET) for _ in range(CONFIG["LIST_ID_SUFFIX_LENGTH"]))
    return f"{CONFIG['LIST_ID_PREFIX']}-{int(now.timestamp() * 1000)}-{suffix}"


def create_custom_list(
    topic: str,
    difficulty: str,
    words: List[VocabularyWord],
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> CustomWordList:
    """Создаёт новый пользовательский список из уже проверенных слов."""
    now = now or datetime.now()
    rng = rng or random.Random()
    return CustomWordList(
        id=_new_list_id(now, rng),
        display_name=topic,
        source_topic=topic,
        difficulty_label=difficulty,
        words=list(words),
        created_at=now,
        word_count=len(words),
    )


def add_custom_list(custom_lists: List[CustomWordList], new_list: CustomWordList) -> List[CustomWordList]:
    return list(custom_lists) + [new_list]


def remove_custom_list(
    custom_lists: List[CustomWordList],
    settings: ListSelectionSettings,
    list_id: str
) -> Tuple[List[CustomWordList], ListSelectionSettings]:
    """Удаляет список и снимает его с активных."""
    remaining = [custom_list for custom_list in custom_lists if custom_list.id != list_id]
    new_settings = settings.model_copy(update={
        "active_list_ids": [active_id for active_id in settings.active_list_ids if active_id != list_id]
    })
    return remaining, new_settings


def toggle_list(settings: ListSelectionSettings, list_id: str, active: bool) -> ListSelectionSettings:
    active_ids = [active_id for active_id in settings.active_list_ids if active_id != list_id]
    if active:
        active_ids.append(list_id)
    return settings.model_copy(update={"active_list_ids": active_ids})


def set_include_built_in(settings: ListSelectionSettings, include: bool) -> ListSelectionSettings:
    return settings.model_copy(update={"include_built_in": include})
