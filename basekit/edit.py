"""Building new strings from old ones: slicing, trimming, joining, editing."""

from __future__ import annotations

from typing import Callable, Optional


def _require_text(text: Optional[str]) -> str:
    if text is None:
        raise ValueError("text must not be None")
    return text


def _require_non_empty(text: Optional[str]) -> str:
    if not text:
        raise ValueError("text must be a non-empty string")
    return text


def substr(text: Optional[str], start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A missing text or a start at or beyond its end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if text is None or start >= len(text):
        return ""
    return text[start:start + length]


def trim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Text without the leading and trailing characters found in charset.

    An empty or missing charset returns text unchanged (None becomes '');
    a missing text with a real charset gives None.
    """
    if not charset:
        return text or ""
    if text is None:
        return None
    return text.strip(charset)


def join(first: Optional[str], second: Optional[str]) -> str:
    """Concatenation of two strings, None counting as empty."""
    return (first or "") + (second or "")


def join_many(*args: Optional[str]) -> str:
    """Concatenation of every argument in order, None counting as empty."""
    return "".join(part for part in args if part)


def map_indexed(
    text: Optional[str], func: Callable[[int, str], str]
) -> Optional[str]:
    """New string made of func(index, char) for each character of text."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def each_indexed(text: Optional[str], func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for each character of text."""
    if not text:
        return
    for index, char in enumerate(text):
        func(index, char)


def insert(text: Optional[str], addition: Optional[str], position: int) -> str:
    """Text with addition placed at position.

    A missing addition leaves text unchanged. A missing text or a position
    outside 0..len(text) raises ValueError.
    """
    text = _require_text(text)
    if addition is None:
        return text
    if position < 0 or position > len(text):
        raise ValueError(f"position {position} is outside the text")
    return text[:position] + addition + text[position:]


def delete_char(text: Optional[str], index: int) -> str:
    """Text without the character at index.

    An empty or missing text raises ValueError; an index outside the text
    leaves it unchanged.
    """
    text = _require_non_empty(text)
    if not 0 <= index < len(text):
        return text
    return text[:index] + text[index + 1:]


def delete_from(text: Optional[str], index: int) -> str:
    """Text cut short just before index.

    An empty or missing text raises ValueError; an index outside the text
    leaves it unchanged.
    """
    text = _require_non_empty(text)
    if not 0 <= index < len(text):
        return text
    return text[:index]


def delete_n_from(text: Optional[str], index: int, count: int) -> str:
    """Text without up to count characters starting at index.

    An empty or missing text raises ValueError; an index outside the text or
    a negative count leaves it unchanged.
    """
    text = _require_non_empty(text)
    if not 0 <= index < len(text) or count < 0:
        return text
    return text[:index] + text[index + count:]


def truncate(text: Optional[str], start: int, length: int) -> str:
    """Text without exactly length characters starting at start.

    Raises ValueError when text is missing or the span runs past its end.
    """
    text = _require_text(text)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise ValueError("span runs past the end of the text")
    return text[:start] + text[start + length:]


def resize(text: Optional[str], delta: int) -> str:
    """Text grown by delta NUL characters, or shortened by -delta.

    Raises ValueError when text is missing or the new length would not be
    positive.
    """
    text = _require_text(text)
    new_length = len(text) + delta
    if new_length <= 0:
        raise ValueError("resized text must keep at least one character")
    if delta < 0:
        return text[:new_length]
    return text + "\0" * delta