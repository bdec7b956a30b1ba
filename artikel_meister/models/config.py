# Словарь конфигурационных параметров приложения
CONFIG = {
    # Настройки прогресса по умолчанию
    "MASTERY_THRESHOLD": 3,                # Правильных ответов до статуса "выучено"
    "REPETITION_PREFERENCE": 50,           # 0 = максимум разнообразия, 100 = максимум повторения
    "MASTERED_WORDS_ENABLED": False,       # Возвращать ли выученные слова в ротацию
    "MASTERED_WORDS_RESET_DAYS": 7,        # Через сколько дней выученное слово может вернуться

    # Временные окна для пулов выборки
    "RECENT_INCORRECT_HOURS": 24,          # Ошибка считается "недавней" в течение суток
    "RECENTLY_SHOWN_MINUTES": 60,          # Слово считается "недавно показанным" в течение часа

    # Пользовательские списки
    "INCLUDE_BUILT_IN": True,              # Встроенный словарь включён по умолчанию
    "LIST_ID_PREFIX": "custom",            # Префикс идентификатора списка
    "LIST_ID_SUFFIX_LENGTH": 9,            # Длина случайного суффикса идентификатора

    # Генерация списков внешним сервисом
    "GENERATION_COUNT_DEFAULT": 25,        # Количество слов по умолчанию
    "GENERATION_COUNT_MIN": 10,            # Минимум слов в запросе
    "GENERATION_COUNT_MAX": 100,           # Максимум слов в запросе
    "GENERATION_TIMEOUT_BASE": 35,         # Базовый таймаут запроса (сек)
    "GENERATION_TIMEOUT_MAX": 50,          # Максимальный таймаут запроса (сек)

    # Варианты ответа и очки
    "TRANSLATION_CHOICES": 4,              # Вариантов перевода на карточке
    "POINTS_PER_CORRECT": 10,              # Очки за правильный ответ
    "POINTS_PER_STREAK": 2,                # Бонус за каждое слово серии

    # Игра "найди пару"
    "MATCHING_PAIRS": 6,                   # Пар слово-перевод на поле одновременно
}

# Коэффициенты весов пулов: (базовая часть, множитель)
# Пулы повторения растут с p², пулы разнообразия убывают как sqrt(1 - p)
POOL_WEIGHTS = {
    "incorrect": (0.15, 5.0),
    "recent": (0.0, 2.0),
    "fresh": (0.0, 0.4),
    "never_seen": (0.0, 0.6),
    "mastered": (0.0, 0.5),
}

# Ключи хранилища (совпадают с ключами браузерной версии)
STORAGE_KEYS = {
    "progress": "artikel-meister-progress",
    "settings": "artikel-meister-settings",
    "custom_lists": "artikel-meister-custom-lists",
    "list_settings": "artikel-meister-list-settings",
    "game_stats": "artikel-meister-game-stats",
    "word_history": "artikel-meister-word-history",
}

# Допустимые артикли
ARTICLES = ["der", "die", "das"]
