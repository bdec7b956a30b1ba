from fastapi import APIRouter, HTTPException, Depends, status
from typing import Any, Dict
import logging

from artikel_meister.api.dependencies import get_game_service
from artikel_meister.models.schemas import (
    ProgressSettings, ProgressSettingsUpdate, ProgressSummary, ProgressExport, GameStats,
    WordCategories
)
from artikel_meister.models.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from artikel_meister.services.game import GameService
from artikel_meister.services.progress_tracker import progress_summary, categorize_words
from artikel_meister.services.session_stats import accuracy
from artikel_meister.services.settings import clamp_settings

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ProgressSummary)
async def get_progress(game: GameService = Depends(get_game_service)):
    """Сводка прогресса по активному словарю."""
    repository = game.repository
    settings = repository.load_settings()
    return progress_summary(game.available_words(), repository.load_progress(), settings.mastery_threshold)


@router.get("/words", response_model=WordCategories)
async def get_word_categories(game: GameService = Depends(get_game_service)):
    """Слова активного словаря по категориям: выучено, в процессе, не начато."""
    settings = game.repository.load_settings()
    return categorize_words(game.available_words(), game.repository.load_progress(), settings.mastery_threshold)


@router.get("/settings", response_model=ProgressSettings)
async def get_settings(game: GameService = Depends(get_game_service)):
    return game.repository.load_settings()


@router.put("/settings", response_model=ProgressSettings)
async def update_settings(update: ProgressSettingsUpdate, game: GameService = Depends(get_game_service)):
    """Изменяет настройки; значения вне диапазона зажимаются, а не отклоняются."""
    settings = clamp_settings(game.repository.load_settings(), update)
    game.repository.save_settings(settings)
    logger.info(f"Settings updated: {settings.model_dump()}")
    return settings


@router.get("/stats")
async def get_game_stats(game: GameService = Depends(get_game_service)) -> Dict[str, Any]:
    stats: GameStats = game.repository.load_game_stats(game.clock())
    return {
        "stats": stats.model_dump(mode="json"),
        "accuracy": accuracy(stats.correct_answers, stats.total_questions),
        "articleAccuracy": accuracy(stats.articles_correct, stats.articles_attempted),
        "translationAccuracy": accuracy(stats.translations_correct, stats.translations_attempted),
    }


@router.post("/reset")
async def reset_progress(game: GameService = Depends(get_game_service)):
    game.reset_progress()
    return {"status": "success", "message": SUCCESS_MESSAGES["progress_reset"]}


@router.post("/reset-history")
async def reset_word_history(game: GameService = Depends(get_game_service)):
    game.reset_word_history()
    return {"status": "success"}


@router.get("/export", response_model=ProgressExport)
async def export_progress(game: GameService = Depends(get_game_service)):
    return game.repository.export_progress(game.clock())


@router.post("/import", response_model=ProgressExport)
async def import_progress(data: Dict[str, Any], game: GameService = Depends(get_game_service)):
    try:
        return game.repository.import_progress(data)
    except ValueError as e:
        logger.error(f"Failed to import progress: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["invalid_import"]
        )
