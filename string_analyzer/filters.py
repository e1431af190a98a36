from typing import Iterable, List, Optional
import re

from string_analyzer.exceptions import ConflictingFiltersError, InvalidFilterValueError
from string_analyzer.models import AnalyzedRecord, FilterSet


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered not in ("true", "false"):
        raise InvalidFilterValueError(f'Invalid value for "{name}": must be "true" or "false"')
    return lowered == "true"


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(name: str, raw: str) -> int:
    # Plain ASCII integers only; int() alone would take "1_0" or non-ASCII digits
    text = raw.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise InvalidFilterValueError(f'Invalid value for "{name}": must be an integer')
    try:
        return int(text)
    except ValueError:
        raise InvalidFilterValueError(f'Invalid value for "{name}": must be an integer')


def build_filter_set(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None
) -> FilterSet:
    """
    Validate raw query parameters into a FilterSet.
    Raises InvalidFilterValueError on bad values and
    ConflictingFiltersError when min_length > max_length.
    """
    filters = {}

    if is_palindrome is not None:
        filters["is_palindrome"] = _parse_bool("is_palindrome", is_palindrome)

    if min_length is not None:
        filters["min_length"] = _parse_int("min_length", min_length)

    if max_length is not None:
        filters["max_length"] = _parse_int("max_length", max_length)

    if word_count is not None:
        filters["word_count"] = _parse_int("word_count", word_count)

    if contains_character is not None:
        if len(contains_character) != 1:
            raise InvalidFilterValueError(
                'Invalid value for "contains_character": must be a single character'
            )
        filters["contains_character"] = contains_character

    filter_set = FilterSet(**filters)
    if filter_set.is_conflicting():
        raise ConflictingFiltersError(
            "Conflicting filters: min_length cannot be greater than max_length",
            filters=filter_set.applied()
        )
    return filter_set


def matches(record: AnalyzedRecord, filters: FilterSet) -> bool:
    """Check a single record against every filter that is set"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        # Case-insensitive containment
        if filters.contains_character.lower() not in record.value.lower():
            return False

    return True


def apply_filters(records: Iterable[AnalyzedRecord], filters: FilterSet) -> List[AnalyzedRecord]:
    """Keep the records that satisfy all filters, preserving order"""
    return [record for record in records if matches(record, filters)]
