"""Rendering platforms, style fallback and download options for an emoji."""

from __future__ import annotations

import re

from emojidir.assets import get_asset_url
from emojidir.labels import STYLES

DEFAULT_PLATFORM = "fluent"
CANONICAL_STYLES = STYLES
NOTO_SIZES = (32, 72, 128, 512)

# Variation selectors are not part of Noto's file names.
NOTO_SKIPPED_CODEPOINTS = {"fe0e", "fe0f"}

PLATFORM_CONFIGS = {
    "fluent": {
        "id": "fluent",
        "name": "Fluent Emoji",
        "description": "Microsoft Design System",
        "icon": "🎨",
        "styles": ["3d", "color", "flat", "high-contrast"],
    },
    "nato": {
        "id": "nato",
        "name": "Noto Emoji",
        "description": "Google Open Source Design",
        "icon": "🎯",
        "styles": ["color"],
    },
    "unicode": {
        "id": "unicode",
        "name": "System Emoji",
        "description": "Auto-detect System",
        "icon": "💻",
        "styles": [],
    },
}


def normalize_platform(platform: str | None) -> str:
    return platform if platform in PLATFORM_CONFIGS else DEFAULT_PLATFORM


def platform_slug(platform: str) -> str:
    return f"{normalize_platform(platform)}-emoji"


def platform_from_slug(slug: str | None) -> str:
    """``"nato-emoji"`` -> ``"nato"``; anything unknown maps to the default."""
    value = (slug or "").strip().lower()
    if value.endswith("-emoji"):
        value = value[: -len("-emoji")]
    return normalize_platform(value)


def select_platform_view(platform: str, catalog: dict) -> dict:
    """Return the catalog as seen on one platform.

    All platforms share the same records; the view only records which
    platform is active and which styles its picker offers.
    """
    config = PLATFORM_CONFIGS[normalize_platform(platform)]
    return {
        **catalog,
        "platform": config["id"],
        "styles": list(config["styles"]),
    }


def resolve_style_path(styles: dict | None, style: str) -> str | None:
    """Resolve ``style`` to an asset path, or None to render the bare glyph.

    Tries the exact key, then ``<style>-default``, then the first style the
    emoji has at all.
    """
    if not styles:
        return None
    for key in (style, f"{style}-default"):
        if styles.get(key):
            return styles[key]
    for path in styles.values():
        if path:
            return path
    return None


def is_style_available(emoji: dict, style: str) -> bool:
    styles = emoji.get("styles") or {}
    return bool(styles.get(style) or styles.get(f"{style}-default"))


def _is_variant_key(key: str) -> bool:
    return (
        key == "default"
        or key.endswith("-default")
        or any(tone in key for tone in ("dark", "light", "medium"))
    )


def available_styles(emoji: dict) -> list[str]:
    """Styles the picker offers for this emoji.

    Canonical styles that resolve come first; an emoji with none of them
    offers its other keys, skipping themed defaults and skin-tone variants.
    """
    styles = emoji.get("styles") or {}
    canonical = [style for style in CANONICAL_STYLES if is_style_available(emoji, style)]
    if canonical:
        return canonical
    return [key for key in styles if not _is_variant_key(key) and styles[key]]


def default_style(emoji: dict) -> str:
    offered = available_styles(emoji)
    return offered[0] if offered else "3d"


def noto_filename(unicode: str) -> str:
    """``"1F468 200D 1F469"`` or ``"1f468-200d-1f469"`` -> ``"emoji_u1f468_200d_1f469"``."""
    cleaned = re.sub(r"u\+", "", unicode or "", flags=re.IGNORECASE).lower()
    codes = [code for code in re.split(r"[\s\-_]+", cleaned) if code and code not in NOTO_SKIPPED_CODEPOINTS]
    return f"emoji_u{'_'.join(codes)}"


def download_options(emoji: dict, platform: str, style: str | None = None, base_url: str | None = None) -> list[dict]:
    """Return ``{"label", "url", "filename"}`` entries for the download buttons."""
    platform = normalize_platform(platform)
    style = style or default_style(emoji)
    path = resolve_style_path(emoji.get("styles"), style)

    if platform == "fluent":
        if not path:
            return []
        extension = path.rsplit(".", 1)[-1].lower() if "." in path else "png"
        return [
            {
                "label": extension.upper(),
                "url": get_asset_url(path, base_url),
                "filename": f"{emoji.get('id', 'emoji')}_{style}.{extension}",
            }
        ]

    if (platform == "unicode" and not path) or not emoji.get("unicode"):
        return []

    filename = noto_filename(emoji.get("unicode", ""))
    return [
        {
            "label": f"PNG {size}px",
            "url": get_asset_url(f"nato-emoji/png/{size}/{filename}.png", base_url),
            "filename": f"{emoji.get('id', 'emoji')}_{size}px.png",
        }
        for size in NOTO_SIZES
    ]
