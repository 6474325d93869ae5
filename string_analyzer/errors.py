"""Error taxonomy shared by the store, the filter engine and the API layer.

Every error carries the HTTP status it maps to, so the exception handlers in
``string_analyzer.main`` can turn any of them into ``{"error": message}``.
"""

from typing import Optional


class StringAnalyzerError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(StringAnalyzerError):
    """Malformed or missing input. 400 by default, 422 for wrong value types."""

    status_code = 400
    default_message = "Invalid request"


class DuplicateError(StringAnalyzerError):
    status_code = 409
    default_message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    status_code = 404
    default_message = "String does not exist in the system"


class UnparseableQueryError(StringAnalyzerError):
    status_code = 400
    default_message = "Unable to parse natural language query"


class InternalError(StringAnalyzerError):
    pass
