# Встроенный словарь: частотные немецкие существительные с артиклями и переводами
from artikel_meister.models.schemas import VocabularyWord

_RAW_WORDS = [
    ("Haus", "das", ["house", "home", "building"], "easy"),
    ("Mann", "der", ["man", "husband"], "easy"),
    ("Frau", "die", ["woman", "wife", "Mrs."], "easy"),
    ("Kind", "das", ["child", "kid"], "easy"),
    ("Auto", "das", ["car", "automobile"], "easy"),
    ("Buch", "das", ["book"], "easy"),
    ("Tisch", "der", ["table", "desk"], "easy"),
    ("Stuhl", "der", ["chair"], "easy"),
    ("Wasser", "das", ["water"], "easy"),
    ("Brot", "das", ["bread"], "easy"),

    ("Zeit", "die", ["time"], "medium"),
    ("Jahr", "das", ["year"], "medium"),
    ("Tag", "der", ["day"], "medium"),
    ("Nacht", "die", ["night"], "medium"),
    ("Stadt", "die", ["city", "town"], "medium"),
    ("Land", "das", ["country", "land"], "medium"),
    ("Welt", "die", ["world"], "medium"),
    ("Leben", "das", ["life"], "medium"),
    ("Arbeit", "die", ["work", "job"], "medium"),
    ("Geld", "das", ["money"], "medium"),

    ("Freund", "der", ["friend"], "easy"),
    ("Familie", "die", ["family"], "easy"),
    ("Schule", "die", ["school"], "easy"),
    ("Lehrer", "der", ["teacher"], "easy"),
    ("Student", "der", ["student"], "easy"),
    ("Zimmer", "das", ["room"], "easy"),
    ("Küche", "die", ["kitchen"], "easy"),
    ("Bad", "das", ["bathroom"], "easy"),
    ("Fenster", "das", ["window"], "easy"),
    ("Tür", "die", ["door"], "easy"),

    ("Problem", "das", ["problem"], "medium"),
    ("Frage", "die", ["question"], "medium"),
    ("Antwort", "die", ["answer"], "medium"),
    ("Weg", "der", ["way", "path"], "medium"),
    ("Grund", "der", ["reason", "ground"], "medium"),
    ("Geschichte", "die", ["story", "history"], "hard"),
    ("Möglichkeit", "die", ["possibility", "opportunity"], "hard"),
    ("Gesellschaft", "die", ["society", "company"], "hard"),
    ("Entwicklung", "die", ["development"], "hard"),
    ("Beziehung", "die", ["relationship"], "hard"),

    ("Musik", "die", ["music"], "easy"),
    ("Film", "der", ["movie", "film"], "easy"),
    ("Spiel", "das", ["game", "play"], "easy"),
    ("Sport", "der", ["sport"], "easy"),
    ("Telefon", "das", ["telephone", "phone"], "easy"),
    ("Computer", "der", ["computer"], "easy"),
    ("Internet", "das", ["internet"], "medium"),
    ("Universität", "die", ["university"], "medium"),
    ("Krankenhaus", "das", ["hospital"], "medium"),
    ("Restaurant", "das", ["restaurant"], "medium"),
    ("Hotel", "das", ["hotel"], "medium"),
]


def _build_catalog(raw_words):
    """Собирает словарь, отбрасывая повторы по слову без учёта регистра."""
    seen = set()
    catalog = []
    for german, article, english, difficulty in raw_words:
        if german.lower() in seen:
            continue
        seen.add(german.lower())
        catalog.append(VocabularyWord(
            german=german,
            article=article,
            word_class="noun",
            english_translations=english,
            difficulty=difficulty,
        ))
    return catalog


BUILT_IN_WORDS = _build_catalog(_RAW_WORDS)
