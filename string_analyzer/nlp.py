import logging
import re
from typing import Any, Dict

from string_analyzer.errors import UnparseableQueryError, ValidationError
from string_analyzer.filters import FilterSet

logger = logging.getLogger(__name__)

_LONGER_THAN = re.compile(r"longer than (\d+)")
_CONTAINING_LETTER = re.compile(r"containing the letter ([a-z])")


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Parse natural language query into filter parameters.

    Rules run in a fixed order against the lower-cased query, and a later
    rule overwrites an earlier one that set the same field.

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    - "palindromic strings containing the first vowel" -> {is_palindrome: true, contains_character: "a"}
    """
    if not query:
        raise ValidationError("Missing query parameter")

    text = query.lower()
    filters: Dict[str, Any] = {}

    if "palindromic" in text:
        filters["is_palindrome"] = True

    if "single word" in text:
        filters["word_count"] = 1

    length_match = _LONGER_THAN.search(text)
    if length_match:
        filters["min_length"] = int(length_match.group(1)) + 1

    letter_match = _CONTAINING_LETTER.search(text)
    if letter_match:
        filters["contains_character"] = letter_match.group(1)

    if "containing the first vowel" in text:
        filters["contains_character"] = "a"

    if not filters:
        logger.info(f"Could not interpret query: {query!r}")
        raise UnparseableQueryError()

    return FilterSet(**filters)
