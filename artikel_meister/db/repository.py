# Чтение и запись состояния игры в хранилище ключ-значение.
# Повреждённые или отсутствующие данные заменяются значениями по умолчанию.

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from artikel_meister.db.database import KeyValueStore
from artikel_meister.models.config import STORAGE_KEYS
from artikel_meister.models.schemas import (
    WordProgressEntry, WordHistoryEntry, ProgressSettings, ListSelectionSettings,
    CustomWordList, GameStats, ProgressExport
)
from artikel_meister.services.session_stats import new_game_stats

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class StateRepository:
    """Типизированный доступ к записям состояния в хранилище."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    # ---- Низкоуровневые операции ----
    def _load_json(self, key: str) -> Optional[Any]:
        # Ошибки самого хранилища пробрасываются, по умолчанию заменяются только пустые и битые данные
        raw = self.store.load(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error(f"Failed to parse {key}: {e}")
            return None

    def _save_json(self, key: str, data: Any) -> None:
        self.store.save(key, json.dumps(data, ensure_ascii=False))

    def _load_model(self, key: str, model: Type[BaseModel], default: BaseModel) -> BaseModel:
        data = self._load_json(key)
        if data is None:
            return default
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid {key}, using defaults: {e}")
            return default

    def _load_model_map(self, key: str, model: Type[BaseModel]) -> Dict[str, BaseModel]:
        data = self._load_json(key)
        if not isinstance(data, dict):
            if data is not None:
                logger.error(f"Invalid {key}: expected an object")
            return {}
        result = {}
        for german, value in data.items():
            try:
                result[german] = model.model_validate(value)
            except ValidationError as e:
                # Битая запись слова равносильна её отсутствию
                logger.warning(f"Skipping invalid {key} entry for '{german}': {e}")
        return result

    def _save_model_map(self, key: str, values: Dict[str, BaseModel]) -> None:
        self._save_json(key, {german: value.model_dump(mode="json") for german, value in values.items()})

    # ---- Прогресс слов ----
    def load_progress(self) -> Dict[str, WordProgressEntry]:
        return self._load_model_map(STORAGE_KEYS["progress"], WordProgressEntry)

    def save_progress(self, progress: Dict[str, WordProgressEntry]) -> None:
        self._save_model_map(STORAGE_KEYS["progress"], progress)

    # ---- История показов ----
    def load_word_history(self) -> Dict[str, WordHistoryEntry]:
        return self._load_model_map(STORAGE_KEYS["word_history"], WordHistoryEntry)

    def save_word_history(self, history: Dict[str, WordHistoryEntry]) -> None:
        self._save_model_map(STORAGE_KEYS["word_history"], history)

    # ---- Настройки ----
    def load_settings(self) -> ProgressSettings:
        return self._load_model(STORAGE_KEYS["settings"], ProgressSettings, ProgressSettings())

    def save_settings(self, settings: ProgressSettings) -> None:
        self._save_json(STORAGE_KEYS["settings"], settings.model_dump(mode="json"))

    def load_list_settings(self) -> ListSelectionSettings:
        return self._load_model(STORAGE_KEYS["list_settings"], ListSelectionSettings, ListSelectionSettings())

    def save_list_settings(self, settings: ListSelectionSettings) -> None:
        self._save_json(STORAGE_KEYS["list_settings"], settings.model_dump(mode="json"))

    # ---- Пользовательские списки ----
    def load_custom_lists(self) -> List[CustomWordList]:
        data = self._load_json(STORAGE_KEYS["custom_lists"])
        if not isinstance(data, list):
            if data is not None:
                logger.error("Invalid custom lists: expected an array")
            return []
        lists = []
        for item in data:
            try:
                lists.append(CustomWordList.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid custom list: {e}")
        return lists

    def save_custom_lists(self, lists: List[CustomWordList]) -> None:
        self._save_json(STORAGE_KEYS["custom_lists"], [item.model_dump(mode="json") for item in lists])

    # ---- Статистика игры ----
    def load_game_stats(self, now: Optional[datetime] = None) -> GameStats:
        return self._load_model(STORAGE_KEYS["game_stats"], GameStats, new_game_stats(now))

    def save_game_stats(self, stats: GameStats) -> None:
        self._save_json(STORAGE_KEYS["game_stats"], stats.model_dump(mode="json"))

    # ---- Экспорт / импорт ----
    def export_progress(self, now: Optional[datetime] = None) -> ProgressExport:
        return ProgressExport(
            progress=self.load_progress(),
            settings=self.load_settings(),
            exportDate=now or datetime.now(),
        )

    def import_progress(self, data: Dict[str, Any]) -> ProgressExport:
        """Загружает прогресс и настройки из экспортированного файла."""
        if not isinstance(data, dict) or not data.get("progress") or not data.get("settings"):
            raise ValueError("Import data must contain progress and settings")
        imported = ProgressExport.model_validate({
            "progress": data["progress"],
            "settings": data["settings"],
            "exportDate": data.get("exportDate") or datetime.now(),
        })
        self.save_progress(imported.progress)
        self.save_settings(imported.settings)
        logger.info(f"Imported progress for {len(imported.progress)} words")
        return imported

    # ---- Сброс ----
    def reset_all_progress(self) -> None:
        for key in ("progress", "settings", "word_history"):
            self.store.remove(STORAGE_KEYS[key])
        logger.info("All progress reset")

    def reset_word_history(self) -> None:
        self.store.remove(STORAGE_KEYS["word_history"])

    def reset_custom_lists(self) -> None:
        for key in ("custom_lists", "list_settings"):
            self.store.remove(STORAGE_KEYS[key])
        logger.info("Custom lists reset")
