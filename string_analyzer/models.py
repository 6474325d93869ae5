from datetime import datetime, timezone
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=0)
    is_palindrome: bool
    unique_characters: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """An analyzed string as kept in the store. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime = Field(default_factory=utc_now)
