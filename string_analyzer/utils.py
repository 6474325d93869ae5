import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.models import StringProperties

_LETTER = re.compile(r"[a-z]")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the exact bytes of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, nothing ignored)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of the ASCII letters a-z, case-folded"""
    return dict(Counter(char for char in text.lower() if _LETTER.fullmatch(char)))


def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )
