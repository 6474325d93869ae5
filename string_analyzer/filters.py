import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from string_analyzer.errors import ValidationError
from string_analyzer.models import StringRecord

FILTER_FIELDS = ("is_palindrome", "min_length", "max_length", "word_count", "contains_character")

_INTEGER = re.compile(r"-?[0-9]+")


class FilterSet(BaseModel):
    """
    Structured filters for stored strings. Every field is optional and a
    record matches only if all of the present ones hold.
    """

    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    @field_validator("is_palindrome", mode="before")
    @classmethod
    def validate_is_palindrome(cls, v):
        """Only the literals true/false are accepted from a query string"""
        if v is None or isinstance(v, bool):
            return v
        if v == "true":
            return True
        if v == "false":
            return False
        raise ValueError('must be "true" or "false"')

    @field_validator("min_length", "max_length", "word_count", mode="before")
    @classmethod
    def validate_int(cls, v):
        if v is None:
            return v
        if isinstance(v, bool):
            raise ValueError("must be an integer")
        if isinstance(v, int):
            return v
        if isinstance(v, str) and _INTEGER.fullmatch(v):
            return int(v)
        raise ValueError("must be an integer")

    @field_validator("contains_character", mode="before")
    @classmethod
    def validate_contains_character(cls, v):
        if v is None:
            return v
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError("must be a single character")
        return v.lower()

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "FilterSet":
        """
        Build a FilterSet from raw query parameters.

        Unknown parameters are ignored. Any malformed value rejects the whole
        set with a ValidationError before anything is filtered.
        """
        raw = {name: params[name] for name in FILTER_FIELDS if name in params}
        try:
            return cls(**raw)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = first["loc"][0] if first["loc"] else "filters"
            message = first["msg"].removeprefix("Value error, ")
            raise ValidationError(f"{field} {message}") from e

    def applied(self) -> Dict[str, Any]:
        """The filters actually in effect, for echoing back to the caller"""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()

    def matches(self, record: StringRecord) -> bool:
        props = record.properties

        if self.is_palindrome is not None and props.is_palindrome != self.is_palindrome:
            return False
        if self.min_length is not None and props.length < self.min_length:
            return False
        if self.max_length is not None and props.length > self.max_length:
            return False
        if self.word_count is not None and props.word_count != self.word_count:
            return False
        if self.contains_character is not None and self.contains_character not in record.value.lower():
            return False

        return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    """Keep the records matching every filter, preserving their order"""
    return [record for record in records if filters.matches(record)]
