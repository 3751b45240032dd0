"""Load the base emoji index and merge per-locale translation overlays into it."""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

from emojidir.codec import expand_catalog, group_by_category
from emojidir.labels import DEFAULT_LOCALE
from emojidir.storage import index_path, read_index

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = PROJECT_ROOT / "data"


def find_duplicate_glyphs(emojis: list[dict], glyph_key: str = "glyph", id_key: str = "id") -> dict[str, list[str]]:
    """Return ``glyph -> [ids]`` for every glyph shared by more than one record."""
    seen: dict[str, list[str]] = {}
    for emoji in emojis:
        glyph = emoji.get(glyph_key)
        if glyph:
            seen.setdefault(glyph, []).append(emoji.get(id_key, ""))
    return {glyph: ids for glyph, ids in seen.items() if len(ids) > 1}


def translations_by_glyph(overlay: dict, locale: str) -> dict[str, dict]:
    """Map glyph to the overlay's ``i18n[locale]`` entry; later records win."""
    lookup: dict[str, dict] = {}
    for emoji in overlay.get("emojis", []):
        entry = (emoji.get("i18n") or {}).get(locale)
        if entry and emoji.get("glyph"):
            lookup[emoji["glyph"]] = entry
    return lookup


def merge_locale(base: dict, overlay: dict | None, locale: str) -> dict:
    """Return a copy of ``base`` with ``i18n[locale]`` taken from ``overlay``.

    The base record set is authoritative: nothing is added or removed, and
    only ``i18n[locale]`` changes on records whose glyph the overlay knows.
    ``base`` itself is left untouched.
    """
    if overlay is None:
        return base

    lookup = translations_by_glyph(overlay, locale)
    emojis = []
    for emoji in base.get("emojis", []):
        entry = lookup.get(emoji.get("glyph"))
        if entry is None:
            emojis.append(emoji)
            continue
        merged = dict(emoji)
        merged["i18n"] = {
            **(emoji.get("i18n") or {}),
            locale: {
                "name": entry.get("name", ""),
                "keywords": list(entry.get("keywords") or []),
                "tts": entry.get("tts", ""),
            },
        }
        emojis.append(merged)

    return {
        **base,
        "emojis": emojis,
        "emojis_by_category": group_by_category(emojis, base.get("categories", [])),
    }


def load_base_catalog(data_dir: Path = DATA_DIR, suffix: str = ".json") -> dict:
    path = index_path(data_dir, suffix=suffix)
    try:
        return expand_catalog(read_index(path))
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not load emoji index '{path}': {e}", file=sys.stderr)
        raise


def load_overlay(locale: str, data_dir: Path = DATA_DIR, suffix: str = ".json") -> dict | None:
    """Return the expanded overlay for ``locale`` or None when there is none."""
    if not locale or locale == DEFAULT_LOCALE:
        return None

    path = index_path(data_dir, locale, suffix)
    if not path.exists():
        print(f"Warning: No emoji index for '{locale}', using the base index.", file=sys.stderr)
        return None
    try:
        return expand_catalog(read_index(path))
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and cbor2.CBORDecodeError are both ValueErrors
        print(f"Warning: Could not read '{path}', using the base index. Error: {e}", file=sys.stderr)
        return None


def load_catalog(locale: str = DEFAULT_LOCALE, data_dir: Path = DATA_DIR, suffix: str = ".json") -> dict:
    """Load the base index and apply the overlay for ``locale``.

    A missing or unreadable overlay falls back to the base index; a missing
    base index raises.
    """
    base = load_base_catalog(data_dir, suffix)
    return merge_locale(base, load_overlay(locale, data_dir, suffix), locale)


@lru_cache(maxsize=16)
def load_catalog_cached(locale: str = DEFAULT_LOCALE, data_dir: str = str(DATA_DIR), suffix: str = ".json") -> dict:
    """Memoized ``load_catalog`` keyed by locale, directory and suffix.

    Every caller gets the same catalog object. Treat it as read-only: use
    ``merge_locale`` or a copy to derive a changed catalog.
    """
    return load_catalog(locale, Path(data_dir), suffix)
