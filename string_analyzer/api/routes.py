from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import Any, Optional
import logging

from string_analyzer import crud
from string_analyzer.crud import StringStore
from string_analyzer.exceptions import ConflictingFiltersError, MissingQueryError, UnparsableQueryError
from string_analyzer.filters import apply_filters, build_filter_set
from string_analyzer.schemas import (
    ErrorResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.services.nl_parser import parse_natural_language_query
from string_analyzer.storage import get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/strings",
    response_model=StringResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_string(
    payload: Any = Body(None),
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    string_data = StringCreate.from_payload(payload)
    record = crud.create_string_analysis(store, string_data.value)
    return StringResponse.from_record(record)


@router.get("/strings", response_model=StringListResponse, responses={400: {"model": ErrorResponse}})
async def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Filter strings that contain this character"),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    filters = build_filter_set(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character
    )

    strings = apply_filters(store.list(), filters)
    data = [StringResponse.from_record(s) for s in strings]

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.applied()
    )


# Must be registered before /strings/{string_value}
@router.get(
    "/strings/filter-by-natural-language",
    response_model=NaturalLanguageResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if query is None or not query.strip():
        raise MissingQueryError()

    failed_interpretation = {"interpreted_query": InterpretedQuery(original=query).model_dump()}
    try:
        filters = parse_natural_language_query(query)
    except ConflictingFiltersError as e:
        raise ConflictingFiltersError(
            "Query parsed but resulted in conflicting filters (min_length greater than max_length)",
            extra=failed_interpretation,
            filters=e.filters
        )
    except UnparsableQueryError:
        raise UnparsableQueryError(
            "Unable to parse natural language query. Try a different phrasing.",
            extra=failed_interpretation
        )

    strings = apply_filters(store.list(), filters)
    data = [StringResponse.from_record(s) for s in strings]

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied())
    )


@router.get("/strings/{string_value}", response_model=StringResponse, responses={404: {"model": ErrorResponse}})
async def get_string(
    string_value: str,
    store: StringStore = Depends(get_store)
):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_record(store.get(string_value))


@router.delete(
    "/strings/{string_value}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_string(
    string_value: str,
    store: StringStore = Depends(get_store)
):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
