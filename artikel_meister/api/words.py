from fastapi import APIRouter, HTTPException, Depends, status
import logging

from artikel_meister.api.dependencies import get_game_service
from artikel_meister.models.schemas import (
    NextWord, UserAnswer, AnswerResult, SelectionStats, MatchingRound, MatchAttempt, MatchResult
)
from artikel_meister.models.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from artikel_meister.services.game import GameService, WordNotFoundError
from artikel_meister.services.matching import score_match

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/next", response_model=NextWord)
async def next_word(game: GameService = Depends(get_game_service)):
    """Выбирает следующее слово с учётом истории и настроек."""
    try:
        result = game.next_word()
    except Exception as e:
        logger.error(f"Error selecting next word: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ERROR_MESSAGES["general_error"]
        )

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ERROR_MESSAGES["no_words"]
        )
    return result


@router.post("/answer", response_model=AnswerResult)
async def submit_answer(answer: UserAnswer, game: GameService = Depends(get_game_service)):
    """Проверяет ответ пользователя и обновляет прогресс."""
    if not answer.chosenTranslation:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["no_answer"]
        )

    try:
        return game.submit_answer(answer.german, answer.chosenArticle, answer.chosenTranslation)
    except WordNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ERROR_MESSAGES["word_not_found"]
        )
    except Exception as e:
        logger.error(f"Error submitting answer: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ERROR_MESSAGES["general_error"]
        )


@router.get("/selection-stats", response_model=SelectionStats)
async def get_selection_stats(game: GameService = Depends(get_game_service)):
    """Количество слов в каждой категории выборки."""
    return game.selection_stats()


@router.post("/reset-mastered")
async def reset_mastered_words(game: GameService = Depends(get_game_service)):
    game.reset_mastered()
    return {"status": "success", "message": SUCCESS_MESSAGES["mastered_reset"]}


@router.get("/matching", response_model=MatchingRound)
async def get_matching_round(game: GameService = Depends(get_game_service)):
    """Набор пар для игры "найди пару"."""
    return game.matching_round()


@router.post("/matching/check", response_model=MatchResult)
async def check_match(attempt: MatchAttempt):
    # Идентификаторы колонок совпадают только у слова и его перевода
    is_match = attempt.germanId == attempt.englishId
    points, streak = score_match(is_match, attempt.streak)
    return MatchResult(isMatch=is_match, points=points, streak=streak)
