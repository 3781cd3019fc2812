"""Searching, comparing and classifying strings and character codes."""

from __future__ import annotations

from typing import Optional

_DIGITS = frozenset("0123456789")


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _code_at(text: str, index: int) -> int:
    """Code of the character at index, or 0 past the end of text."""
    return ord(text[index]) if index < len(text) else 0


def safe_length(text: Optional[str]) -> int:
    """Length of text, treating None as the empty string."""
    return len(text) if text else 0


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char in text.

    Searching for the NUL character yields the length of text, the position
    of the terminator. Returns None when char does not occur.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char in text, or None.

    Searching for the NUL character yields the length of text.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def compare(first: str, second: str) -> int:
    """Difference of the first differing character codes, 0 when equal."""
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    shared = min(len(first), len(second))
    return _code_at(first, shared) - _code_at(second, shared)


def compare_n(first: str, second: str, limit: int) -> int:
    """Bounded comparison of two strings.

    A limit of 0 always compares equal. Otherwise characters are examined
    while the index does not exceed limit, so up to index limit + 1 may
    decide the result.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not limit:
        return 0
    index = 0
    while index <= limit:
        a = _code_at(first, index)
        b = _code_at(second, index)
        if not (a or b) or a != b:
            break
        index += 1
    return _code_at(first, index) - _code_at(second, index)


def find_within(haystack: Optional[str], needle: str, limit: int) -> Optional[int]:
    """Index of needle in the first limit characters of haystack, or None.

    An empty needle is found at 0 unless haystack is None or limit is 0.
    """
    if haystack is None or limit <= 0:
        return None
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def strings_equal(first: Optional[str], second: Optional[str]) -> bool:
    """True when both strings hold the same characters; None equals ''."""
    return (first or "") == (second or "")


def is_integer_string(text: Optional[str]) -> bool:
    """True for an optional sign followed by at least one ASCII digit."""
    if not text:
        return False
    if text[0] in "+-":
        text = text[1:]
    return bool(text) and all(ch in _DIGITS for ch in text)


def last_index_of(text: Optional[str], char: str) -> int:
    """Index of the last occurrence of char in text, or -1."""
    _check_char(char)
    return text.rfind(char) if text else -1


def index_of(char: str, text: str) -> int:
    """Index of the first occurrence of char in text, or -1."""
    _check_char(char)
    return text.find(char)


def count_char(text: str, char: str) -> int:
    """Number of occurrences of char in text."""
    _check_char(char)
    return text.count(char)


def jump_to(text: str, index: int, char: str) -> Optional[int]:
    """Index of the next occurrence of char strictly after index.

    Returns None when index is the last position of text or when char does
    not occur again.
    """
    _check_char(char)
    if index + 1 >= len(text):
        return None
    found = text.find(char, index + 1)
    return found if found >= 0 else None


def to_upper(code: int) -> int:
    """Upper-case code for an ASCII lower-case letter; others unchanged."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def to_lower(code: int) -> int:
    """Lower-case code for an ASCII upper-case letter; others unchanged."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code