import hashlib

from string_analyzer.utils import (
    analyze_string,
    compute_sha256,
    count_unique_characters,
    count_words,
    get_character_frequency,
    is_palindrome,
)


class TestPalindrome:

    def test_case_insensitive(self):
        assert is_palindrome("Racecar") is True
        assert is_palindrome("hello") is False

    def test_spaces_and_punctuation_are_not_ignored(self):
        assert is_palindrome("never odd or even") is False
        assert is_palindrome("a b a") is True
        assert is_palindrome("ab!ba") is True
        assert is_palindrome("ab!ab") is False

    def test_empty_and_single_character(self):
        assert is_palindrome("") is True
        assert is_palindrome("x") is True


class TestCounts:

    def test_unique_characters_is_case_sensitive(self):
        assert count_unique_characters("Aa") == 2
        assert count_unique_characters("Racecar") == 5

    def test_unique_characters_counts_whitespace_and_punctuation(self):
        assert count_unique_characters("a a!") == 3
        assert count_unique_characters("") == 0

    def test_word_count(self):
        assert count_words("  a  b c ") == 3
        assert count_words("hello") == 1
        assert count_words("tab\tand\nnewline") == 3

    def test_word_count_of_blank_input(self):
        assert count_words("") == 0
        assert count_words("   \t\n") == 0


class TestCharacterFrequency:

    def test_only_letters_case_folded(self):
        assert get_character_frequency("AAbb1! ") == {"a": 2, "b": 2}

    def test_absent_letters_are_absent(self):
        freq = get_character_frequency("Hello, World!")
        assert freq == {"h": 1, "e": 1, "l": 3, "o": 2, "w": 1, "r": 1, "d": 1}
        assert "z" not in freq

    def test_non_ascii_letters_are_skipped(self):
        assert get_character_frequency("café ñ") == {"c": 1, "a": 1, "f": 1}

    def test_no_letters(self):
        assert get_character_frequency("123 !?") == {}


class TestHash:

    def test_matches_sha256_of_exact_bytes(self):
        assert compute_sha256("hello") == hashlib.sha256(b"hello").hexdigest()

    def test_deterministic(self):
        assert compute_sha256("same input") == compute_sha256("same input")

    def test_no_case_folding_or_trimming(self):
        assert compute_sha256("Hello") != compute_sha256("hello")
        assert compute_sha256("hello ") != compute_sha256("hello")


class TestAnalyzeString:

    def test_properties(self):
        props = analyze_string("Never odd")

        assert props.length == 9
        assert props.is_palindrome is False
        assert props.unique_characters == 7
        assert props.word_count == 2
        assert props.sha256_hash == compute_sha256("Never odd")
        assert props.character_frequency_map == {"n": 1, "e": 2, "v": 1, "r": 1, "o": 1, "d": 2}

    def test_empty_string(self):
        props = analyze_string("")

        assert props.length == 0
        assert props.is_palindrome is True
        assert props.unique_characters == 0
        assert props.word_count == 0
        assert props.character_frequency_map == {}
