# answer_handler.py
# Проверяет ответ пользователя (артикль и перевод) и готовит варианты ответа.

import random
import logging
from typing import List, Optional

from artikel_meister.models.config import CONFIG
from artikel_meister.models.schemas import VocabularyWord, AnswerEvaluation

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def requires_article(word: VocabularyWord, article_guessing_enabled: bool = True) -> bool:
    """Нужно ли угадывать артикль: только у слов с артиклем и при включённой настройке."""
    return article_guessing_enabled and word.article is not None


def evaluate_answer(
    word: VocabularyWord,
    chosen_article: Optional[str],
    chosen_translation: str,
    requires_article: bool
) -> AnswerEvaluation:
    """
    Оценивает ответ. Правильным считается только основной перевод,
    хотя пользователю показываются все варианты.
    """
    translation_correct = chosen_translation == word.primary_translation

    if not requires_article:
        return AnswerEvaluation(
            is_correct=translation_correct,
            article_correct=None,
            translation_correct=translation_correct,
        )

    article_correct = chosen_article == word.article
    return AnswerEvaluation(
        is_correct=article_correct and translation_correct,
        article_correct=article_correct,
        translation_correct=translation_correct,
    )


def build_choices(
    word: VocabularyWord,
    pool: List[VocabularyWord],
    rng: Optional[random.Random] = None,
    count: int = CONFIG["TRANSLATION_CHOICES"]
) -> List[str]:
    """Основной перевод плюс неверные варианты из других слов, перемешанные."""
    rng = rng or random.Random()
    correct = word.primary_translation

    wrong = []
    for other in pool:
        translation = other.primary_translation
        if other.key == word.key or translation == correct or translation in wrong:
            continue
        wrong.append(translation)

    rng.shuffle(wrong)
    choices = [correct] + wrong[:max(count - 1, 0)]
    if len(choices) < count:
        logger.warning(f"Only {len(choices)} translation choices available for '{word.german}'")
    rng.shuffle(choices)
    return choices


def points_for(is_correct: bool, new_streak: int) -> int:
    if not is_correct:
        return 0
    return CONFIG["POINTS_PER_CORRECT"] + new_streak * CONFIG["POINTS_PER_STREAK"]
