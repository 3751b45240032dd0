"""Build the compact emoji index from a directory of per-emoji asset folders.

Expected layout (one folder per emoji id)::

    assets/fluent-emoji/grinning-face/
        metadata.json
        3D/grinning_face_3d.png
        Color/grinning_face_color.svg
        Default/3D/grinning_face_3d_default.png   (themed variants)
"""

from __future__ import annotations

import json
import re
import sys
from datetime import datetime, timezone
from pathlib import Path

from emojidir.codec import compact_style_key, group_by_category
from emojidir.overlay import find_duplicate_glyphs

DEFAULT_GROUP = "Other"
METADATA_FILE = "metadata.json"
DEFAULT_DIR = "default"
PROGRESS_EVERY = 100


def style_key(dir_name: str) -> str:
    return re.sub(r"\s+", "-", dir_name.strip().lower())


def first_asset(style_dir: Path) -> str | None:
    files = sorted(p.name for p in style_dir.iterdir() if p.is_file() and not p.name.startswith("."))
    return files[0] if files else None


def _subdirs(path: Path) -> list[Path]:
    return sorted(p for p in path.iterdir() if p.is_dir())


def collect_styles(emoji_dir: Path) -> dict[str, str]:
    """Return compact style key -> ``assets/<id>/...`` path for one emoji folder."""
    folder = emoji_dir.name
    styles: dict[str, str] = {}

    for style_dir in _subdirs(emoji_dir):
        if style_dir.name.lower() == DEFAULT_DIR:
            for themed_dir in _subdirs(style_dir):
                asset = first_asset(themed_dir)
                if asset:
                    key = compact_style_key(f"{style_key(themed_dir.name)}-default")
                    styles[key] = f"assets/{folder}/{style_dir.name}/{themed_dir.name}/{asset}"
            continue

        asset = first_asset(style_dir)
        if asset:
            styles[compact_style_key(style_key(style_dir.name))] = f"assets/{folder}/{style_dir.name}/{asset}"

    return styles


def scan_emoji_folder(assets_dir: Path, folder: str) -> dict | None:
    """Build the compact record for one folder, or None if it has no metadata.

    Unreadable or malformed metadata raises.
    """
    emoji_dir = Path(assets_dir) / folder
    metadata_path = emoji_dir / METADATA_FILE
    if not metadata_path.exists():
        return None

    with open(metadata_path, "r", encoding="utf-8") as f:
        metadata = json.load(f)
    if not isinstance(metadata, dict):
        raise ValueError(f"{METADATA_FILE} is not an object")

    keywords = metadata.get("keywords") or []
    if not isinstance(keywords, list):
        keywords = [str(keywords)]

    return {
        "i": folder,
        "n": metadata.get("cldr") or folder,
        "gl": metadata.get("glyph") or "",
        "gr": metadata.get("group") or DEFAULT_GROUP,
        "k": [str(keyword) for keyword in keywords],
        "u": metadata.get("unicode") or "",
        "t": metadata.get("tts") or "",
        "s": collect_styles(emoji_dir),
    }


def iso_timestamp(moment: datetime | None = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def build_index(assets_dir: Path, generated_at: str | None = None) -> tuple[dict, dict]:
    """
    Scan ``assets_dir`` and build the compact index.

    Returns:
        (index: dict, stats: dict) where stats counts folders, emojis,
        skipped folders and duplicate glyphs.
    """
    assets_dir = Path(assets_dir)
    folders = [p.name for p in _subdirs(assets_dir)]
    print(f"Found {len(folders)} emoji folders in {assets_dir}")

    emojis: list[dict] = []
    skipped: list[str] = []

    for position, folder in enumerate(folders, start=1):
        try:
            emoji = scan_emoji_folder(assets_dir, folder)
        except (OSError, ValueError) as e:
            print(f"  ✗ {folder}: {e}", file=sys.stderr)
            skipped.append(folder)
            continue

        if emoji is not None:
            emojis.append(emoji)

        if position % PROGRESS_EVERY == 0:
            print(f"  Progress: {position}/{len(folders)}")

    categories = sorted({emoji["gr"] for emoji in emojis})
    duplicates = find_duplicate_glyphs(emojis, glyph_key="gl", id_key="i")
    for glyph, ids in duplicates.items():
        print(f"Warning: glyph {glyph} is shared by {', '.join(ids)}; translations for it will collide.", file=sys.stderr)

    index = {
        "e": emojis,
        "c": categories,
        "ec": group_by_category(emojis, categories, group_key="gr"),
        "tc": len(emojis),
        "g": generated_at or iso_timestamp(),
    }
    stats = {
        "folders": len(folders),
        "emojis": len(emojis),
        "categories": len(categories),
        "skipped": skipped,
        "duplicate_glyphs": duplicates,
    }
    return index, stats
