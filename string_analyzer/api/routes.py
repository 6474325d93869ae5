from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse
from typing import Optional

from string_analyzer import crud
from string_analyzer.errors import NotFoundError, ValidationError
from string_analyzer.filters import FilterSet
from string_analyzer.models import StringRecord
from string_analyzer.nlp import parse_natural_language_query
from string_analyzer.schemas import (
    ErrorResponse,
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
)
from string_analyzer.store import ContentStore, get_store

router = APIRouter()


def get_filters(
    is_palindrome: Optional[str] = Query(None, description="true or false"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character to look for"),
) -> FilterSet:
    """Dependency validating the filter query parameters before any filtering runs."""
    params = {
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    }
    return FilterSet.from_query({k: v for k, v in params.items() if v is not None})


@router.get("/", response_class=PlainTextResponse, tags=["health"])
def root():
    """Liveness message"""
    return "String Analysis API is running!"


@router.get("/health", response_model=HealthResponse, tags=["health"])
def health_check(store: ContentStore = Depends(get_store)):
    """Health check endpoint"""
    return HealthResponse(status="healthy", strings=len(store))


@router.post(
    "/strings",
    response_model=StringRecord,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_string(request: Request, store: ContentStore = Depends(get_store)):
    """
    Analyze and store a string.

    The value is taken from the first property of the JSON body, whatever
    its key. Returns 409 if the string already exists.
    """
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Invalid request body or missing 'value' field")

    if not isinstance(body, dict) or not body:
        raise ValidationError("Invalid request body or missing 'value' field")

    value = next(iter(body.values()))
    if not isinstance(value, str):
        raise ValidationError("Value must be a string", status_code=422)

    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError("Value must be valid UTF-8 text", status_code=422)

    return crud.create_string_analysis(store, value)


@router.get(
    "/strings/filter-by-natural-language",
    response_model=NaturalLanguageResponse,
    responses={400: {"model": ErrorResponse}},
)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: ContentStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    filters = parse_natural_language_query(query)
    strings = crud.get_all_strings(store, filters)

    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied()),
    )


@router.get("/strings", response_model=StringListResponse, responses={400: {"model": ErrorResponse}})
def get_all_strings(
    filters: FilterSet = Depends(get_filters),
    store: ContentStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    strings = crud.get_all_strings(store, filters)
    return StringListResponse(data=strings, count=len(strings), filters_applied=filters.applied())


@router.get("/strings/{string_value}", response_model=StringRecord, responses={404: {"model": ErrorResponse}})
def get_string(string_value: str, store: ContentStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = crud.get_string_by_value(store, string_value)
    if record is None:
        raise NotFoundError()
    return record


@router.delete(
    "/strings/{string_value}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
def delete_string(string_value: str, store: ContentStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
