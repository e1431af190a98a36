from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StringProperties(BaseModel):
    """Derived properties of an analyzed string"""
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class AnalyzedRecord(BaseModel):
    """One analyzed string as it lives in the store"""
    model_config = ConfigDict(frozen=True)

    id: str  # SHA-256 hash
    value: str
    properties: StringProperties
    created_at: datetime = Field(default_factory=utc_now)


class FilterSet(BaseModel):
    """
    Typed, AND-combined predicates over analyzed records.
    Unset fields are not applied.
    """
    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def applied(self) -> Dict[str, Any]:
        """Only the filters that are actually set"""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()

    def is_conflicting(self) -> bool:
        return (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        )
