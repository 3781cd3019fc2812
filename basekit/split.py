"""Splitting strings into words on a separator character."""

from __future__ import annotations

from typing import List, Optional

_QUOTES = "'\""


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Non-empty runs of text between occurrences of sep.

    A missing text gives None; an empty text or one made only of separators
    gives an empty list.
    """
    _check_sep(sep)
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def split_words(text: str, sep: str) -> List[str]:
    """Words of text separated by one or more sep characters, in order."""
    _check_sep(sep)
    return [word for word in text.split(sep) if word]


def quote_split(text: str, sep: str) -> List[str]:
    """Split text on sep while honouring quotes.

    A word opened by a single quote runs to the next single quote and keeps
    any separators inside it; the quotes themselves are dropped. A quote
    character met inside a word ends that word. An unterminated single
    quote leaves the rest of the text, quote included, as the last word.
    """
    _check_sep(sep)
    length = len(text)

    def at(index: int) -> str:
        return text[index] if index < length else ""

    def next_word(start: int) -> tuple[int, int]:
        begin = start
        while at(begin) == sep:
            begin += 1
        if at(begin) == "'":
            end = begin + 1
            while at(end) and at(end) != "'":
                end += 1
        elif at(begin):
            end = begin + 1
        else:
            end = begin
        return begin, end

    pieces: List[str] = []
    begin, end = next_word(0)
    while at(end):
        current = at(end)
        quote = current if current in _QUOTES else ""
        if at(begin) != sep and (current == sep or quote):
            if at(begin) == quote:
                pieces.append(text[begin + 1:end])
                end += 1
            else:
                pieces.append(text[begin:end])
            begin, end = next_word(end)
        else:
            end += 1
    if end != begin and at(end) != sep:
        pieces.append(text[begin:end])
    return pieces