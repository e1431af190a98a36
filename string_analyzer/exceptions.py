from fastapi import status
from typing import Any, Dict, Optional


class StringAnalyzerError(Exception):
    """Base class for every client-facing error of the service"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        self.message = message or self.message
        self.extra = extra or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class MissingFieldError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = 'Invalid request body or missing "value" field'


class WrongTypeError(StringAnalyzerError):
    status_code = 422
    message = 'Invalid data type for "value" (must be string)'


class EmptyValueError(StringAnalyzerError):
    status_code = 422
    message = '"value" cannot be an empty string'


class DuplicateStringError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    message = "String already exists in the system"


class StringNotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "String does not exist in the system"


class InvalidFilterValueError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid query parameter values or types"


class ConflictingFiltersError(StringAnalyzerError):
    status_code = 422
    message = "Query parsed but resulted in conflicting filters"

    def __init__(self, message: Optional[str] = None, extra: Optional[Dict[str, Any]] = None,
                 filters: Optional[Dict[str, Any]] = None):
        super().__init__(message, extra)
        # What the parser produced before the conflict was detected
        self.filters = filters or {}


class UnparsableQueryError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Unable to parse natural language query"


class MissingQueryError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = 'Missing "query" parameter for natural language filtering'
