"""Tests for the in-memory record store."""

import threading

import pytest

from string_analyzer.crud import create_string_analysis, delete_string
from string_analyzer.exceptions import DuplicateStringError, EmptyValueError, StringNotFoundError
from string_analyzer.utils import analyze_string


def test_create_and_get(store):
    record = store.create(analyze_string("racecar"))
    assert store.get("racecar") == record
    assert "racecar" in store
    assert len(store) == 1


def test_duplicate_is_rejected(store):
    store.create(analyze_string("hello"))
    with pytest.raises(DuplicateStringError):
        store.create(analyze_string("hello"))
    assert len(store) == 1


def test_duplicate_detection_uses_trimmed_value(store):
    create_string_analysis(store, "hello")
    with pytest.raises(DuplicateStringError):
        create_string_analysis(store, "   hello  ")


def test_case_differences_are_distinct_keys(store):
    create_string_analysis(store, "hello")
    create_string_analysis(store, "Hello")
    assert len(store) == 2


def test_create_string_analysis_rejects_blank(store):
    with pytest.raises(EmptyValueError):
        create_string_analysis(store, "   ")
    assert len(store) == 0


def test_get_missing(store):
    with pytest.raises(StringNotFoundError):
        store.get("missing")


def test_list_keeps_insertion_order(store):
    for value in ["b", "a", "c"]:
        create_string_analysis(store, value)
    assert [r.value for r in store.list()] == ["b", "a", "c"]


def test_list_is_a_snapshot(store):
    create_string_analysis(store, "one")
    snapshot = store.list()
    create_string_analysis(store, "two")
    assert len(snapshot) == 1


def test_delete_then_get(store):
    create_string_analysis(store, "hello")
    delete_string(store, "hello")
    with pytest.raises(StringNotFoundError):
        store.get("hello")


def test_delete_missing(store):
    with pytest.raises(StringNotFoundError):
        store.delete("missing")


def test_clear(store):
    create_string_analysis(store, "one")
    store.clear()
    assert len(store) == 0


def test_concurrent_creates_store_one_record(store):
    errors = []

    def worker():
        try:
            store.create(analyze_string("same value"))
        except DuplicateStringError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 1
    assert len(errors) == 7


def test_returned_records_cannot_alter_the_store(store):
    record = create_string_analysis(store, "hello")
    record.properties.character_frequency_map["z"] = 99
    store.get("hello").properties.character_frequency_map["q"] = 1
    store.list()[0].properties.character_frequency_map.clear()

    stored = store.get("hello")
    assert stored.properties.character_frequency_map == {"h": 1, "e": 1, "l": 2, "o": 1}
