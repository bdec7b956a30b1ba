# Модуль для хранения текстовых сообщений приложения

# Сообщения ошибок
ERROR_MESSAGES = {
    "no_words": "No words available. Enable a word list to start playing.",
    "word_not_found": "This word is not in the active word lists.",
    "no_answer": "Choose a translation",
    "list_not_found": "Word list not found.",
    "empty_list": "The generated list contains no valid words.",
    "invalid_import": "Import file must contain progress and settings.",
    "general_error": "Something went wrong. Please try again.",
}

# Сообщения успеха
SUCCESS_MESSAGES = {
    "correct_answer": "Perfect!",
    "list_saved": "Saved \"{}\" with {} words",
    "list_deleted": "List deleted successfully",
    "progress_reset": "All progress has been reset",
    "mastered_reset": "Mastered words are back in rotation",
    "lists_reset": "Custom lists have been removed",
    "progress_imported": "Progress imported",
}

# Сообщения о результатах
RESULT_MESSAGES = {
    "wrong_answer": "Not quite! {} {} means: {}",
    "partial_result": "Partial result: Generated {} out of {} requested words",
    "built_in_list": "{} Common Words",
}
