"""Convert the emoji index between its compact on-disk form and expanded dicts.

The compact form only renames keys to keep the JSON small:

    {"e": [...], "c": [...], "ec": {...}, "tc": 1234, "g": "2024-..."}

Each record uses ``i``/``n``/``gl``/``gr``/``k``/``u``/``t``/``s`` and an
optional ``i18n`` mapping of ``locale -> {"n", "k", "t"}``.
"""

from __future__ import annotations

from typing import Iterable


class CatalogFormatError(ValueError):
    """Raised when a compact document is missing its emoji table."""


EMOJI_KEYS = {
    "i": "id",
    "n": "name",
    "gl": "glyph",
    "gr": "group",
    "k": "keywords",
    "u": "unicode",
    "t": "tts",
}

I18N_KEYS = {
    "n": "name",
    "k": "keywords",
    "t": "tts",
}

STYLE_KEYS = {
    "3": "3d",
    "c": "color",
    "f": "flat",
    "h": "high-contrast",
    "3d": "3d-default",
    "cd": "color-default",
    "fd": "flat-default",
    "hd": "high-contrast-default",
}

COMPACT_STYLE_KEYS = {full: short for short, full in STYLE_KEYS.items()}

EMPTY_EMOJI = {
    "id": "",
    "name": "",
    "glyph": "",
    "group": "",
    "keywords": [],
    "unicode": "",
    "tts": "",
}


def expand_style_key(key: str) -> str:
    return STYLE_KEYS.get(key, key)


def compact_style_key(key: str) -> str:
    return COMPACT_STYLE_KEYS.get(key, key)


def expand_styles(compact: dict | None) -> dict[str, str]:
    # compact "3d" means "3d-default"; unknown keys pass through
    return {expand_style_key(key): value for key, value in (compact or {}).items() if value is not None}


def compact_styles(styles: dict | None) -> dict[str, str]:
    return {compact_style_key(key): value for key, value in (styles or {}).items() if value is not None}


def expand_i18n(compact: dict) -> dict:
    entry = {full: compact.get(short, "") for short, full in I18N_KEYS.items()}
    entry["keywords"] = list(entry["keywords"] or [])
    return entry


def compact_i18n(entry: dict) -> dict:
    compact = {short: entry.get(full, "") for short, full in I18N_KEYS.items()}
    compact["k"] = list(compact["k"] or [])
    return compact


def expand_emoji(compact: dict) -> dict:
    emoji = {}
    for short, full in EMOJI_KEYS.items():
        value = compact.get(short, EMPTY_EMOJI[full])
        emoji[full] = list(value or []) if full == "keywords" else value
    emoji["styles"] = expand_styles(compact.get("s"))

    if compact.get("i18n"):
        emoji["i18n"] = {locale: expand_i18n(data) for locale, data in compact["i18n"].items()}
    return emoji


def compact_emoji(emoji: dict) -> dict:
    compact = {}
    for short, full in EMOJI_KEYS.items():
        value = emoji.get(full, EMPTY_EMOJI[full])
        compact[short] = list(value or []) if full == "keywords" else value
    compact["s"] = compact_styles(emoji.get("styles"))

    if emoji.get("i18n"):
        compact["i18n"] = {locale: compact_i18n(data) for locale, data in emoji["i18n"].items()}
    return compact


def group_by_category(
    emojis: Iterable[dict],
    categories: Iterable[str] = (),
    group_key: str = "group",
) -> dict[str, list[dict]]:
    """Group records by category, keyed in ``categories`` order.

    Groups that appear in the records but not in ``categories`` are appended
    in first-seen order, so every record lands in exactly one bucket.
    """
    grouped: dict[str, list[dict]] = {category: [] for category in categories}
    for emoji in emojis:
        grouped.setdefault(emoji.get(group_key, ""), []).append(emoji)
    return grouped


def expand_catalog(compact: dict) -> dict:
    if not isinstance(compact, dict) or not isinstance(compact.get("e"), list):
        raise CatalogFormatError("compact emoji index has no 'e' table")

    emojis = [expand_emoji(record) for record in compact["e"]]
    categories = list(compact["c"]) if compact.get("c") is not None else sorted({e["group"] for e in emojis})

    return {
        "emojis": emojis,
        "categories": categories,
        "emojis_by_category": group_by_category(emojis, categories),
        "total_count": compact.get("tc", len(emojis)),
        "generated_at": compact.get("g", ""),
    }


def compact_catalog(catalog: dict) -> dict:
    emojis = [compact_emoji(emoji) for emoji in catalog.get("emojis", [])]
    categories = list(catalog.get("categories") or sorted({e["gr"] for e in emojis}))

    return {
        "e": emojis,
        "c": categories,
        "ec": group_by_category(emojis, categories, group_key="gr"),
        "tc": catalog.get("total_count", len(emojis)),
        "g": catalog.get("generated_at", ""),
    }
