# Приведение пользовательских настроек к допустимым границам
from typing import Optional

from artikel_meister.models.schemas import ProgressSettings, ProgressSettingsUpdate


def _clamp(value: int, low: int, high: Optional[int] = None) -> int:
    value = max(value, low)
    if high is not None:
        value = min(value, high)
    return value


def clamp_settings(
    current: ProgressSettings,
    update: ProgressSettingsUpdate
) -> ProgressSettings:
    """Применяет изменения настроек, зажимая числа в допустимые диапазоны."""
    changes = {}
    if update.masteryThreshold is not None:
        changes["mastery_threshold"] = _clamp(update.masteryThreshold, 1)
    if update.repetitionPreference is not None:
        changes["repetition_preference"] = _clamp(update.repetitionPreference, 0, 100)
    if update.masteredWordsEnabled is not None:
        changes["mastered_words_enabled"] = update.masteredWordsEnabled
    if update.masteredWordsResetDays is not None:
        changes["mastered_words_reset_days"] = _clamp(update.masteredWordsResetDays, 1)
    if update.articleGuessingEnabled is not None:
        changes["article_guessing_enabled"] = update.articleGuessingEnabled
    return current.model_copy(update=changes)
