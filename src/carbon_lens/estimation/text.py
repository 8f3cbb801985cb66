"""Text normalization and ordered keyword matching."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from functools import lru_cache
from typing import TypeVar

V = TypeVar("V")


def normalize_text(value: str | None) -> str:
    if not value:
        return ""
    text = unicodedata.normalize("NFKC", value).lower()
    text = text.replace("’", "'").replace("_", " ").replace("-", " ")
    return re.sub(r"\s+", " ", text).strip()


def join_text(*values: str | None) -> str:
    return normalize_text(" ".join(value for value in values if value))


def contains_keyword(text: str, keyword: str, *, whole_word: bool = False) -> bool:
    """Return True if ``keyword`` occurs in normalized ``text`` at a word start."""
    return _keyword_pattern(keyword, whole_word).search(text) is not None


def first_match(
    text: str,
    table: Iterable[tuple[str, V]],
    *,
    whole_word: bool = False,
) -> tuple[str, V] | None:
    """Return the first ``(keyword, value)`` pair whose keyword occurs in ``text``.

    Table order is the match priority, not the position in the text.
    """
    if not text:
        return None
    for keyword, value in table:
        if contains_keyword(text, keyword, whole_word=whole_word):
            return keyword, value
    return None


def first_keyword(text: str, keywords: Iterable[str], *, whole_word: bool = False) -> str | None:
    if not text:
        return None
    for keyword in keywords:
        if contains_keyword(text, keyword, whole_word=whole_word):
            return keyword
    return None


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str, whole_word: bool) -> re.Pattern[str]:
    body = re.escape(normalize_text(keyword))
    suffix = r"(?!\w)" if whole_word else ""
    return re.compile(r"(?<!\w)" + body + suffix)
