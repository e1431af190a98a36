import hashlib
from collections import Counter
from typing import Dict
import re

from string_analyzer.models import AnalyzedRecord, StringProperties

# Palindrome check only looks at ASCII letters and digits
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """
    Check if string is a palindrome.
    Case-insensitive, ignores everything except ASCII letters and digits.
    A string with nothing left after stripping is not a palindrome.
    """
    cleaned = _NON_ALNUM.sub("", text.lower())
    return bool(cleaned) and cleaned == cleaned[::-1]


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character (case-sensitive)"""
    return dict(Counter(text))


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(get_character_frequency(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def analyze_string(raw_value: str) -> AnalyzedRecord:
    """
    Analyze a string and return the record with all computed properties.

    The value is trimmed first; length is counted in code points.
    Rejecting an empty trimmed value is left to the caller.
    """
    value = raw_value.strip()
    sha256_hash = compute_sha256(value)
    frequency = get_character_frequency(value)

    properties = StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(frequency),
        word_count=count_words(value),
        sha256_hash=sha256_hash,
        character_frequency_map=frequency,
    )
    return AnalyzedRecord(id=sha256_hash, value=value, properties=properties)
