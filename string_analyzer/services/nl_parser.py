"""
Keyword based translation of free-text queries into a FilterSet.

This is pattern matching, not language understanding. Rules run in order
and each one contributes at most one filter; when two rules touch the same
field the later one wins.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
- "palindromic strings that contain the first vowel" -> {is_palindrome: true, contains_character: "a"}
"""
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from string_analyzer.exceptions import ConflictingFiltersError, UnparsableQueryError
from string_analyzer.models import FilterSet

logger = logging.getLogger(__name__)

Rule = Callable[[str], Optional[Dict[str, Any]]]

CONTAINS_PATTERN = re.compile(
    r"\b(?:contains|containing|has|with) (?:the )?(?:letter|character) ([a-z0-9])(?![a-z0-9])"
)
LONGER_PATTERN = re.compile(r"\b(?:longer|greater) than ([0-9]{1,9})(?![0-9])")
SHORTER_PATTERN = re.compile(r"\b(?:shorter|less) than ([0-9]{1,9})(?![0-9])")
# "than 10 characters" belongs to the longer/shorter rules
EXACT_LENGTH_PATTERN = re.compile(r"(?<!than )\b([0-9]{1,9}) characters?\b")


def _palindrome_rule(query: str) -> Optional[Dict[str, Any]]:
    if "palindrome" in query or "palindromic" in query:
        return {"is_palindrome": True}
    return None


def _single_word_rule(query: str) -> Optional[Dict[str, Any]]:
    if "single word" in query or "one word" in query:
        return {"word_count": 1}
    return None


def _contains_character_rule(query: str) -> Optional[Dict[str, Any]]:
    match = CONTAINS_PATTERN.search(query)
    if match:
        return {"contains_character": match.group(1)}
    return None


def _first_vowel_rule(query: str) -> Optional[Dict[str, Any]]:
    # Always "a", whatever vowel the query might mean
    if "first vowel" in query:
        return {"contains_character": "a"}
    return None


def _longer_than_rule(query: str) -> Optional[Dict[str, Any]]:
    match = LONGER_PATTERN.search(query)
    if match:
        return {"min_length": int(match.group(1)) + 1}
    return None


def _shorter_than_rule(query: str) -> Optional[Dict[str, Any]]:
    match = SHORTER_PATTERN.search(query)
    if match:
        return {"max_length": int(match.group(1)) - 1}
    return None


def _exact_length_rule(query: str) -> Optional[Dict[str, Any]]:
    match = EXACT_LENGTH_PATTERN.search(query)
    if match:
        length = int(match.group(1))
        return {"min_length": length, "max_length": length}
    return None


RULES: List[Rule] = [
    _palindrome_rule,
    _single_word_rule,
    _contains_character_rule,
    _first_vowel_rule,
    _longer_than_rule,
    _shorter_than_rule,
    _exact_length_rule,
]


def normalize_query(query: str) -> str:
    """Lower-case, trim and collapse whitespace runs"""
    return " ".join(query.lower().split())


def extract_filters(query: str) -> Dict[str, Any]:
    """Run every rule over the query and merge what they produce"""
    normalized = normalize_query(query)
    filters: Dict[str, Any] = {}
    for rule in RULES:
        contribution = rule(normalized)
        if contribution:
            filters.update(contribution)
    return filters


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Parse natural language query into a FilterSet.

    Raises UnparsableQueryError if nothing was recognised and
    ConflictingFiltersError if the length bounds contradict each other.
    """
    filters = extract_filters(query)

    if not filters:
        logger.info(f"No filters recognised in query: {query!r}")
        raise UnparsableQueryError()

    min_length = filters.get("min_length")
    max_length = filters.get("max_length")
    if min_length is not None and max_length is not None and min_length > max_length:
        logger.info(f"Conflicting filters parsed from query {query!r}: {filters}")
        raise ConflictingFiltersError(filters=filters)

    return FilterSet(**filters)
