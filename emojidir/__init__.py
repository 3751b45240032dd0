"""Emoji directory index: compact codec, locale overlays, search and platform views."""

from emojidir.codec import CatalogFormatError, compact_catalog, expand_catalog
from emojidir.overlay import load_catalog, merge_locale
from emojidir.platforms import resolve_style_path, select_platform_view
from emojidir.query import filter_by_category, find_emoji, get_keywords, get_name, get_tts, search_emojis

__version__ = "0.1.0"

__all__ = [
    "CatalogFormatError",
    "compact_catalog",
    "expand_catalog",
    "filter_by_category",
    "find_emoji",
    "get_keywords",
    "get_name",
    "get_tts",
    "load_catalog",
    "merge_locale",
    "resolve_style_path",
    "search_emojis",
    "select_platform_view",
]
