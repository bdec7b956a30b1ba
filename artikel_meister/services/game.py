import random
import logging
from datetime import datetime
from typing import Callable, List, Optional

from artikel_meister.data.german_words import BUILT_IN_WORDS
from artikel_meister.db.repository import StateRepository
from artikel_meister.models.schemas import VocabularyWord, NextWord, AnswerResult, SelectionStats, MatchingRound
from artikel_meister.services.answer_handler import (
    evaluate_answer, requires_article, build_choices, points_for
)
from artikel_meister.services.consolidator import consolidate
from artikel_meister.services.matching import matching_round
from artikel_meister.services.picker import select_next, selection_stats
from artikel_meister.services.progress_tracker import update_progress
from artikel_meister.services.session_stats import record_round
from artikel_meister.services.word_history import record_answer, reset_mastered

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class WordNotFoundError(LookupError):
    """Слово отсутствует в активных списках."""


class GameService:
    """Проводит раунд игры: выбор слова, проверка ответа, обновление и сохранение состояния."""

    def __init__(
        self,
        repository: StateRepository,
        built_in: Optional[List[VocabularyWord]] = None,
        clock: Callable[[], datetime] = datetime.now,
        rng: Optional[random.Random] = None
    ):
        self.repository = repository
        self.built_in = BUILT_IN_WORDS if built_in is None else built_in
        self.clock = clock
        self.rng = rng or random.Random()

    def available_words(self) -> List[VocabularyWord]:
        """Рабочий словарь; если все списки выключены, используется встроенный."""
        words = consolidate(
            self.built_in,
            self.repository.load_custom_lists(),
            self.repository.load_list_settings(),
        )
        if not words:
            logger.warning("Consolidated word list is empty, falling back to built-in words")
            words = list(self.built_in)
        return words

    def find_word(self, german: str) -> VocabularyWord:
        key = german.lower()
        for word in self.available_words():
            if word.key == key:
                return word
        raise WordNotFoundError(german)

    def next_word(self) -> Optional[NextWord]:
        words = self.available_words()
        settings = self.repository.load_settings()
        history = self.repository.load_word_history()

        word = select_next(words, history, settings, now=self.clock(), rng=self.rng)
        if word is None:
            return None

        logger.info(f"Selected word '{word.german}' from {len(words)} available")
        return NextWord(
            word=word,
            choices=build_choices(word, words, rng=self.rng),
            requiresArticle=requires_article(word, settings.article_guessing_enabled),
        )

    def submit_answer(
        self,
        german: str,
        chosen_article: Optional[str],
        chosen_translation: str
    ) -> AnswerResult:
        """Оценивает ответ и сразу сохраняет историю, прогресс и статистику."""
        word = self.find_word(german)
        settings = self.repository.load_settings()
        now = self.clock()

        evaluation = evaluate_answer(
            word,
            chosen_article,
            chosen_translation,
            requires_article(word, settings.article_guessing_enabled),
        )

        history, entry = record_answer(
            self.repository.load_word_history(),
            word.german,
            evaluation.is_correct,
            settings.mastery_threshold,
            now=now,
        )
        self.repository.save_word_history(history)

        progress = update_progress(
            self.repository.load_progress(),
            word.german,
            evaluation.is_correct,
            evaluation.article_correct,
            evaluation.translation_correct,
            now=now,
        )
        self.repository.save_progress(progress)

        stats = self.repository.load_game_stats(now)
        new_streak = stats.current_streak + 1 if evaluation.is_correct else 0
        stats = record_round(
            stats,
            evaluation.is_correct,
            new_streak,
            evaluation.article_correct,
            evaluation.translation_correct,
            now=now,
        )
        self.repository.save_game_stats(stats)

        logger.info(f"Answer for '{word.german}': is_correct {evaluation.is_correct}, streak {new_streak}")

        return AnswerResult(
            isCorrect=evaluation.is_correct,
            articleCorrect=evaluation.article_correct,
            translationCorrect=evaluation.translation_correct,
            correctArticle=word.article,
            correctTranslation=word.primary_translation,
            allTranslations=list(word.english_translations),
            points=points_for(evaluation.is_correct, new_streak),
            history=entry,
            stats=stats,
        )

    def matching_round(self) -> MatchingRound:
        return matching_round(self.available_words(), rng=self.rng)

    def selection_stats(self) -> SelectionStats:
        return selection_stats(self.available_words(), self.repository.load_word_history(), now=self.clock())

    def reset_mastered(self) -> None:
        self.repository.save_word_history(reset_mastered(self.repository.load_word_history()))
        logger.info("Mastered words reset")

    def reset_progress(self) -> None:
        self.repository.reset_all_progress()

    def reset_custom_lists(self) -> None:
        self.repository.reset_custom_lists()

    def reset_word_history(self) -> None:
        self.repository.reset_word_history()
        logger.info("Word history reset")
