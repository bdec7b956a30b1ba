from fastapi import APIRouter, HTTPException, Depends, status
from typing import List, Optional
import logging

from artikel_meister.api.dependencies import get_repository
from artikel_meister.data.german_words import BUILT_IN_WORDS
from artikel_meister.db.repository import StateRepository
from artikel_meister.models.schemas import (
    CustomWordList, ListSelectionSettings, ListSettingsUpdate, ListToggle,
    ActiveListsInfo, GeneratedVocabulary
)
from artikel_meister.models.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from artikel_meister.services.consolidator import (
    active_lists_info, create_custom_list, add_custom_list, remove_custom_list,
    toggle_list, set_include_built_in
)
from artikel_meister.services.generated_lists import (
    clean_generated_words, clamp_requested_count, generation_timeout, partial_warning
)

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CustomWordList])
async def get_custom_lists(repository: StateRepository = Depends(get_repository)):
    return repository.load_custom_lists()


@router.post("", response_model=CustomWordList, status_code=status.HTTP_201_CREATED)
async def save_generated_list(
    generated: GeneratedVocabulary,
    repository: StateRepository = Depends(get_repository)
):
    """Сохраняет список, полученный от генератора, после проверки слов."""
    words = clean_generated_words(generated.words)
    if not words:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["empty_list"]
        )

    warning = generated.warning
    if warning is None and generated.count:
        warning = partial_warning(generated.count, len(words))
    if warning:
        logger.warning(f"Saving partial list for topic '{generated.topic}': {warning}")

    new_list = create_custom_list(generated.topic.strip(), generated.difficulty, words)
    repository.save_custom_lists(add_custom_list(repository.load_custom_lists(), new_list))
    logger.info(SUCCESS_MESSAGES["list_saved"].format(new_list.display_name, new_list.word_count))
    return new_list


@router.delete("/{list_id}")
async def delete_custom_list(list_id: str, repository: StateRepository = Depends(get_repository)):
    custom_lists = repository.load_custom_lists()
    if not any(custom_list.id == list_id for custom_list in custom_lists):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ERROR_MESSAGES["list_not_found"]
        )

    remaining, settings = remove_custom_list(custom_lists, repository.load_list_settings(), list_id)
    repository.save_custom_lists(remaining)
    repository.save_list_settings(settings)
    return {"status": "success", "message": SUCCESS_MESSAGES["list_deleted"]}


@router.get("/settings", response_model=ListSelectionSettings)
async def get_list_settings(repository: StateRepository = Depends(get_repository)):
    return repository.load_list_settings()


@router.put("/settings", response_model=ListSelectionSettings)
async def update_list_settings(
    update: ListSettingsUpdate,
    repository: StateRepository = Depends(get_repository)
):
    settings = repository.load_list_settings()
    if update.activeListIds is not None:
        # Повторы идентификаторов не нужны, порядок сохраняется
        settings = settings.model_copy(update={"active_list_ids": list(dict.fromkeys(update.activeListIds))})
    if update.includeBuiltIn is not None:
        settings = set_include_built_in(settings, update.includeBuiltIn)
    repository.save_list_settings(settings)
    return settings


@router.put("/{list_id}/active", response_model=ListSelectionSettings)
async def set_list_active(
    list_id: str,
    toggle: ListToggle,
    repository: StateRepository = Depends(get_repository)
):
    settings = toggle_list(repository.load_list_settings(), list_id, toggle.active)
    repository.save_list_settings(settings)
    return settings


@router.get("/active-info", response_model=ActiveListsInfo)
async def get_active_lists_info(repository: StateRepository = Depends(get_repository)):
    return active_lists_info(BUILT_IN_WORDS, repository.load_custom_lists(), repository.load_list_settings())


@router.post("/reset")
async def reset_lists(repository: StateRepository = Depends(get_repository)):
    repository.reset_custom_lists()
    return {"status": "success", "message": SUCCESS_MESSAGES["lists_reset"]}


@router.get("/generation-timeout")
async def get_generation_timeout(count: Optional[int] = None):
    """Количество слов для запроса к генератору и таймаут ожидания ответа."""
    requested = clamp_requested_count(count)
    return {"count": requested, "timeoutSeconds": generation_timeout(requested)}
