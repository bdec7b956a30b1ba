from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Dict, Any, Literal
from datetime import datetime

from artikel_meister.models.config import CONFIG, ARTICLES

Article = Literal["der", "die", "das"]


def _naive_local(value: Optional[datetime]) -> Optional[datetime]:
    # Часы приложения возвращают локальное время без зоны; сохранённые значения приводятся к нему
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class VocabularyWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    german: str = Field(min_length=1)
    article: Optional[Article] = None
    word_class: str = "noun"
    english_translations: List[str] = Field(min_length=1)
    difficulty: Optional[str] = None

    @field_validator("article", mode="before")
    @classmethod
    def _empty_article(cls, value):
        # Пустая строка в сохранённых списках означает "без артикля"
        if value is None or value == "" or value == "none":
            return None
        return value

    @property
    def key(self) -> str:
        return self.german.lower()

    @property
    def primary_translation(self) -> str:
        return self.english_translations[0]


class CustomWordList(BaseModel):
    id: str
    display_name: str
    source_topic: str
    difficulty_label: str
    words: List[VocabularyWord]
    created_at: datetime
    word_count: int = Field(ge=0)

    _created_at_local = field_validator("created_at")(_naive_local)


class ListSelectionSettings(BaseModel):
    active_list_ids: List[str] = Field(default_factory=list)
    include_built_in: bool = CONFIG["INCLUDE_BUILT_IN"]


class WordHistoryEntry(BaseModel):
    last_shown_at: datetime
    times_shown: int = Field(default=0, ge=0)
    recently_incorrect: bool = False
    last_incorrect_at: Optional[datetime] = None
    consecutive_correct_count: int = Field(default=0, ge=0)
    is_mastered: bool = False

    _timestamps_local = field_validator("last_shown_at", "last_incorrect_at")(_naive_local)


class WordProgressEntry(BaseModel):
    correct_count: int = Field(default=0, ge=0)
    total_seen: int = Field(default=0, ge=0)
    last_seen_at: datetime
    article_correct: int = Field(default=0, ge=0)
    article_attempts: int = Field(default=0, ge=0)
    translation_correct: int = Field(default=0, ge=0)
    translation_attempts: int = Field(default=0, ge=0)

    _last_seen_local = field_validator("last_seen_at")(_naive_local)


class ProgressSettings(BaseModel):
    mastery_threshold: int = Field(default=CONFIG["MASTERY_THRESHOLD"], ge=1)
    repetition_preference: int = Field(default=CONFIG["REPETITION_PREFERENCE"], ge=0, le=100)
    mastered_words_enabled: bool = CONFIG["MASTERED_WORDS_ENABLED"]
    mastered_words_reset_days: int = Field(default=CONFIG["MASTERED_WORDS_RESET_DAYS"], ge=1)
    article_guessing_enabled: bool = True


class GameStats(BaseModel):
    total_questions: int = 0
    correct_answers: int = 0
    current_streak: int = 0
    best_streak: int = 0
    articles_correct: int = 0
    articles_attempted: int = 0
    translations_correct: int = 0
    translations_attempted: int = 0
    start_date: datetime
    last_played: datetime

    _dates_local = field_validator("start_date", "last_played")(_naive_local)


class AnswerEvaluation(BaseModel):
    is_correct: bool
    article_correct: Optional[bool] = None
    translation_correct: bool


class PoolWeights(BaseModel):
    incorrect: float
    recent: float
    fresh: float
    never_seen: float
    mastered: float


class WordPools(BaseModel):
    incorrect: List[VocabularyWord] = Field(default_factory=list)
    recent: List[VocabularyWord] = Field(default_factory=list)
    fresh: List[VocabularyWord] = Field(default_factory=list)
    never_seen: List[VocabularyWord] = Field(default_factory=list)
    mastered: List[VocabularyWord] = Field(default_factory=list)


class SelectionStats(BaseModel):
    incorrect: int = 0
    recent: int = 0
    fresh: int = 0
    mastered: int = 0
    never: int = 0


class ActiveListsInfo(BaseModel):
    totalWords: int
    activeListNames: List[str]


class WordCategories(BaseModel):
    mastered: List[VocabularyWord] = Field(default_factory=list)
    in_progress: List[VocabularyWord] = Field(default_factory=list)
    not_started: List[VocabularyWord] = Field(default_factory=list)


class ProgressSummary(BaseModel):
    totalWords: int
    masteredCount: int
    inProgressCount: int
    notStartedCount: int
    completionPercentage: int
    daysStudied: int
    totalQuestions: int


# Схемы HTTP API

class NextWord(BaseModel):
    word: VocabularyWord
    choices: List[str]
    requiresArticle: bool
    articles: List[str] = Field(default_factory=lambda: list(ARTICLES))


class UserAnswer(BaseModel):
    german: str
    chosenArticle: Optional[str] = None
    chosenTranslation: str


class AnswerResult(BaseModel):
    isCorrect: bool
    articleCorrect: Optional[bool] = None
    translationCorrect: bool
    correctArticle: Optional[str] = None
    correctTranslation: str
    allTranslations: List[str]
    points: int
    history: WordHistoryEntry
    stats: GameStats


class GeneratedVocabulary(BaseModel):
    topic: str
    words: List[Dict[str, Any]]
    difficulty: str = "intermediate"
    count: Optional[int] = None
    warning: Optional[str] = None
    finishReason: Optional[str] = None


class ListToggle(BaseModel):
    active: bool


class ListSettingsUpdate(BaseModel):
    activeListIds: Optional[List[str]] = None
    includeBuiltIn: Optional[bool] = None


class ProgressSettingsUpdate(BaseModel):
    masteryThreshold: Optional[int] = None
    repetitionPreference: Optional[int] = None
    masteredWordsEnabled: Optional[bool] = None
    masteredWordsResetDays: Optional[int] = None
    articleGuessingEnabled: Optional[bool] = None


class ProgressExport(BaseModel):
    progress: Dict[str, WordProgressEntry]
    settings: ProgressSettings
    exportDate: datetime


class MatchingPair(BaseModel):
    id: str
    german: str
    article: Optional[str] = None
    english: str


class MatchingRound(BaseModel):
    pairs: List[MatchingPair]
    germanOrder: List[str]
    englishOrder: List[str]


class MatchAttempt(BaseModel):
    germanId: str
    englishId: str
    streak: int = Field(default=0, ge=0)


class MatchResult(BaseModel):
    isMatch: bool
    points: int
    streak: int
