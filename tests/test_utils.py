"""Tests for the string analysis functions."""

import hashlib

import pytest

from string_analyzer.utils import (
    analyze_string,
    compute_sha256,
    count_unique_characters,
    count_words,
    get_character_frequency,
    is_palindrome,
)


class TestIsPalindrome:
    """Tests for palindrome detection."""

    @pytest.mark.parametrize(
        "text",
        ["racecar", "A man a plan a canal Panama", "Was it a car or a cat I saw?", "12321", "x"],
    )
    def test_palindromes(self, text):
        assert is_palindrome(text) is True

    @pytest.mark.parametrize("text", ["hello", "ab", "palindrome"])
    def test_non_palindromes(self, text):
        assert is_palindrome(text) is False

    def test_empty_after_stripping_is_not_palindrome(self):
        assert is_palindrome("!!!") is False
        assert is_palindrome("") is False

    def test_non_ascii_letters_are_ignored(self):
        # Only ASCII letters and digits take part in the comparison
        assert is_palindrome("a\u00e9a") is True
        assert is_palindrome("\u00e9\u00e9\u00e9") is False


def test_compute_sha256_matches_hashlib():
    assert compute_sha256("hello") == hashlib.sha256(b"hello").hexdigest()
    assert compute_sha256("caf\u00e9") == hashlib.sha256("caf\u00e9".encode("utf-8")).hexdigest()


def test_character_frequency_is_case_sensitive():
    freq = get_character_frequency("aAa b")
    assert freq == {"a": 2, "A": 1, " ": 1, "b": 1}
    assert count_unique_characters("aAa b") == 4


def test_count_words():
    assert count_words("hello world") == 2
    assert count_words("  hello   world  ") == 2
    assert count_words("one\ttwo\nthree") == 3
    assert count_words("   ") == 0
    assert count_words("") == 0


class TestAnalyzeString:
    """Tests for the full analysis record."""

    def test_racecar(self):
        record = analyze_string("racecar")
        assert record.value == "racecar"
        assert record.properties.length == 7
        assert record.properties.is_palindrome is True
        assert record.properties.word_count == 1
        assert record.properties.unique_characters == 4
        assert record.id == record.properties.sha256_hash == compute_sha256("racecar")

    def test_value_is_trimmed(self):
        record = analyze_string("  hello   world  ")
        assert record.value == "hello   world"
        assert record.properties.length == len("hello   world")
        assert record.properties.word_count == 2
        assert record.id == compute_sha256("hello   world")

    def test_length_counts_code_points(self):
        record = analyze_string("na\u00efve \U0001F600")
        assert record.properties.length == 7

    def test_frequency_sums_to_length(self):
        record = analyze_string("The quick brown fox, jumps!")
        props = record.properties
        assert sum(props.character_frequency_map.values()) == props.length
        assert props.unique_characters == len(props.character_frequency_map)

    def test_identifier_is_stable_and_distinct(self):
        first = analyze_string("hello")
        second = analyze_string("hello")
        other = analyze_string("Hello")
        assert first.id == second.id
        assert first.id != other.id

    def test_only_created_at_differs_between_runs(self):
        first = analyze_string("stable")
        second = analyze_string("stable")
        assert first.properties == second.properties
        assert first.model_dump(exclude={"created_at"}) == second.model_dump(exclude={"created_at"})
        assert first.created_at.tzinfo is not None

    def test_whitespace_only_yields_empty_value(self):
        record = analyze_string("   ")
        assert record.value == ""
        assert record.properties.word_count == 0
        assert record.properties.is_palindrome is False
