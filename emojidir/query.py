"""Localized field lookup, search and filtering over expanded emoji records."""

from __future__ import annotations

import math
from typing import Sequence

from emojidir.labels import DEFAULT_LOCALE

ALL_CATEGORIES = "all"
ITEMS_PER_PAGE = 56


def _translation(emoji: dict, locale: str) -> dict:
    return (emoji.get("i18n") or {}).get(locale) or {}


def get_name(emoji: dict, locale: str) -> str:
    return _translation(emoji, locale).get("name") or emoji.get("name") or ""


def get_keywords(emoji: dict, locale: str) -> list[str]:
    return list(_translation(emoji, locale).get("keywords") or emoji.get("keywords") or [])


def get_tts(emoji: dict, locale: str) -> str:
    return _translation(emoji, locale).get("tts") or emoji.get("tts") or ""


def _contains(values: Sequence[str], needle: str) -> bool:
    return any(needle in value.lower() for value in values)


def matches_query(emoji: dict, query: str, locale: str, base_locale: str = DEFAULT_LOCALE) -> bool:
    lower_query = query.lower()

    if lower_query in get_name(emoji, locale).lower():
        return True
    if _contains(get_keywords(emoji, locale), lower_query):
        return True
    # pasting the emoji itself finds it
    if query in (emoji.get("glyph") or ""):
        return True

    if locale != base_locale:
        if lower_query in (emoji.get("name") or "").lower():
            return True
        if _contains(emoji.get("keywords") or [], lower_query):
            return True
    return False


def search_emojis(
    emojis: list[dict],
    query: str,
    locale: str,
    base_locale: str = DEFAULT_LOCALE,
) -> list[dict]:
    """Return the emojis matching ``query`` in input order.

    Matches the localized name and keywords, the glyph itself, and for
    non-base locales the English name and keywords too. A blank query
    returns ``emojis`` unchanged.
    """
    if not query or not query.strip():
        return emojis
    return [emoji for emoji in emojis if matches_query(emoji, query, locale, base_locale)]


def filter_by_category(emojis: list[dict], category: str | None) -> list[dict]:
    if not category or category == ALL_CATEGORIES:
        return emojis
    return [emoji for emoji in emojis if emoji.get("group") == category]


def filter_emojis(
    emojis: list[dict],
    category: str | None = ALL_CATEGORIES,
    query: str = "",
    locale: str = DEFAULT_LOCALE,
) -> list[dict]:
    return search_emojis(filter_by_category(emojis, category), query, locale)


def find_emoji(emojis: list[dict], emoji_id: str) -> dict | None:
    for emoji in emojis:
        if emoji.get("id") == emoji_id:
            return emoji
    return None


def paginate(items: list, page: int, per_page: int = ITEMS_PER_PAGE) -> tuple[list, int]:
    """Return the items on ``page`` (1-based, clamped) and the page count."""
    if per_page < 1:
        raise ValueError("per_page must be positive")
    total_pages = math.ceil(len(items) / per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * per_page
    return items[start:start + per_page], total_pages
