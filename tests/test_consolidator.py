import random
import re

from artikel_meister.models.schemas import ListSelectionSettings
from artikel_meister.services.consolidator import (
    consolidate, active_lists_info, create_custom_list, add_custom_list,
    remove_custom_list, toggle_list, set_include_built_in
)


def make_list(list_id, words, now, topic=None):
    custom_list = create_custom_list(topic or list_id, "intermediate", words, now=now)
    return custom_list.model_copy(update={"id": list_id})


def test_built_in_wins_over_custom_duplicate(make_word, now):
    built_in = [make_word("Haus", english=["house"])]
    custom = make_list("travel", [make_word("haus", article="der", english=["cottage"])], now)

    words = consolidate(built_in, [custom], ListSelectionSettings(active_list_ids=["travel"]))

    assert len(words) == 1
    assert words[0].english_translations == ["house"]


def test_custom_lists_resolved_in_stored_order(make_word, now):
    first = make_list("first", [make_word("Bahn", article="die", english=["railway"])], now)
    second = make_list("second", [make_word("BAHN", article="die", english=["track"])], now)
    settings = ListSelectionSettings(active_list_ids=["second", "first"], include_built_in=False)

    words = consolidate([], [first, second], settings)

    assert [w.english_translations for w in words] == [["railway"]]


def test_inactive_lists_and_built_in_toggle(make_word, now):
    built_in = [make_word("Haus")]
    active = make_list("a", [make_word("Zug", article="der")], now)
    inactive = make_list("b", [make_word("Flug", article="der")], now)
    settings = ListSelectionSettings(active_list_ids=["a", "missing"], include_built_in=False)

    words = consolidate(built_in, [active, inactive], settings)

    assert [w.german for w in words] == ["Zug"]


def test_empty_inputs():
    assert consolidate([], [], ListSelectionSettings()) == []


def test_active_lists_info(make_word, now):
    built_in = [make_word("Haus"), make_word("Buch")]
    custom = make_list("a", [make_word("Zug", article="der")], now, topic="Travel")
    settings = ListSelectionSettings(active_list_ids=["a"], include_built_in=True)

    info = active_lists_info(built_in, [custom], settings)

    assert info.activeListNames == ["2 Common Words", "Travel"]
    assert info.totalWords == 3


def test_create_custom_list(make_word, now):
    words = [make_word("Zug", article="der"), make_word("Bahn", article="die")]
    custom = create_custom_list("Travel", "intermediate", words, now=now, rng=random.Random(3))

    assert re.fullmatch(r"custom-\d+-[0-9a-z]{9}", custom.id)
    assert custom.display_name == custom.source_topic == "Travel"
    assert custom.word_count == 2
    assert custom.created_at == now


def test_add_and_remove_custom_list(make_word, now):
    first = make_list("a", [make_word("Zug", article="der")], now)
    second = make_list("b", [make_word("Bahn", article="die")], now)
    lists = add_custom_list(add_custom_list([], first), second)
    settings = ListSelectionSettings(active_list_ids=["a", "b"])

    remaining, new_settings = remove_custom_list(lists, settings, "a")

    assert [item.id for item in remaining] == ["b"]
    assert new_settings.active_list_ids == ["b"]
    assert settings.active_list_ids == ["a", "b"]


def test_toggle_list_and_built_in():
    settings = ListSelectionSettings()
    settings = toggle_list(settings, "a", True)
    settings = toggle_list(settings, "a", True)
    assert settings.active_list_ids == ["a"]

    settings = toggle_list(settings, "a", False)
    assert settings.active_list_ids == []

    assert set_include_built_in(settings, False).include_built_in is False
