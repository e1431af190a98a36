from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from string_analyzer.exceptions import EmptyValueError, MissingFieldError, WrongTypeError
from string_analyzer.models import AnalyzedRecord, StringProperties


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

    @classmethod
    def from_payload(cls, payload: Any) -> "StringCreate":
        """
        Validate a raw JSON body.
        Missing field -> 400, non-string -> 422, blank string -> 422.
        """
        if not isinstance(payload, dict) or "value" not in payload:
            raise MissingFieldError()
        value = payload["value"]
        if not isinstance(value, str):
            raise WrongTypeError()
        if not value.strip():
            raise EmptyValueError()
        return cls(value=value)


class StringResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_record(cls, record: AnalyzedRecord) -> "StringResponse":
        return cls.model_validate(record)


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any] = Field(default_factory=dict)


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    strings_stored: int
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
    interpreted_query: Optional[InterpretedQuery] = None
