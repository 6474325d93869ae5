from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from string_analyzer.models import StringRecord


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    strings: int


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Dict[str, Any]] = None
