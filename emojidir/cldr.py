"""Turn Unicode CLDR annotations into per-locale emoji index overlays.

A CLDR annotations file maps glyphs to keyword and name lists::

    {"annotations": {"annotations": {"😀": {"default": ["face", "grin"], "tts": ["grinning face"]}}}}
"""

from __future__ import annotations

import copy
import json
import re
import sys
import urllib.request
from pathlib import Path

from emojidir.codec import group_by_category
from emojidir.storage import write_index

CLDR_BASE = "https://raw.githubusercontent.com/unicode-org/cldr-json/main/cldr-json/cldr-annotations-full/annotations"

# CLDR file language -> site locale
CLDR_LOCALE_MAP = {
    "zh": "zh-CN",
    "zh-Hant": "zh-TW",
    "zh-hant": "zh-TW",
    "ja": "ja",
    "ko": "ko",
    "en": "en",
    "pt": "pt-BR",
}

# site locale -> CLDR file language
LOCALE_CLDR_MAP = {
    "zh-CN": "zh",
    "zh-TW": "zh-hant",
    "ja": "ja",
    "ko": "ko",
    "en": "en",
    "pt-BR": "pt",
}

ANNOTATION_FILE_RE = re.compile(r"^annotations-(.+)\.json$")


def locale_for_cldr_lang(cldr_lang: str) -> str:
    return CLDR_LOCALE_MAP.get(cldr_lang, cldr_lang)


def cldr_lang_for_locale(locale: str) -> str:
    return LOCALE_CLDR_MAP.get(locale, locale)


def annotation_filename(cldr_lang: str) -> str:
    return f"annotations-{cldr_lang}.json"


def fetch_cldr_annotations(cldr_lang: str, dest: Path) -> Path:
    """Download ``annotations.json`` for one CLDR language to ``dest``."""
    remote_lang = "zh-Hant" if cldr_lang.lower() == "zh-hant" else cldr_lang
    url = f"{CLDR_BASE}/{remote_lang}/annotations.json"
    with urllib.request.urlopen(url) as response:
        data = json.load(response)

    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return dest


def normalize_field(value: str) -> str:
    return " ".join(str(value).replace("\t", " ").replace("\n", " ").split())


def _as_list(value) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        return [str(value)]
    return [str(item) for item in value]


def translations_from_annotations(annotations: dict) -> dict[str, dict]:
    translations: dict[str, dict] = {}
    for glyph, payload in annotations.items():
        if not glyph or not isinstance(payload, dict):
            continue

        keywords: list[str] = []
        seen = set()
        for keyword in _as_list(payload.get("default")):
            normalized = normalize_field(keyword)
            if not normalized or normalized in seen:
                continue
            seen.add(normalized)
            keywords.append(normalized)

        tts_values = [normalize_field(value) for value in _as_list(payload.get("tts"))]
        name = tts_values[0] if tts_values else (keywords[0] if keywords else "")
        translations[glyph] = {"name": name, "keywords": keywords, "tts": name}
    return translations


def process_cldr(cldr_file_path: Path) -> dict[str, dict]:
    """
    Read a CLDR annotations file into ``glyph -> {name, keywords, tts}``.

    Both ``annotations`` and ``annotationsDerived`` documents are accepted.
    A missing or unreadable file yields an empty mapping.
    """
    path = Path(cldr_file_path)
    if not path.exists():
        print(f"ERROR: CLDR file not found: {path}", file=sys.stderr)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not read CLDR file '{path}': {e}", file=sys.stderr)
        return {}
    if not isinstance(data, dict):
        print(f"ERROR: Unexpected CLDR document in '{path}'", file=sys.stderr)
        return {}

    annotations = None
    for kind in ("annotations", "annotationsDerived"):
        section = data.get(kind)
        if isinstance(section, dict) and section.get("annotations"):
            annotations = section["annotations"]
            break
    if not isinstance(annotations, dict):
        print(f"ERROR: No annotations table in '{path}'", file=sys.stderr)
        return {}

    translations = translations_from_annotations(annotations)
    print(f"Processed {len(translations)} CLDR entries from {path.name}")
    return translations


def glyph_to_unicode(glyph: str) -> str:
    """``"👨‍👩"`` -> ``"1f468-200d-1f469"``."""
    return "-".join(f"{ord(char):04x}" for char in glyph)


def unicode_to_glyph(unicode: str) -> str:
    """``"1f468-200d-1f469"`` -> the glyph, or ``""`` if it is not valid hex."""
    if not unicode:
        return ""
    try:
        return "".join(chr(int(code, 16)) for code in re.split(r"[-_]", unicode))
    except (ValueError, OverflowError):
        return ""


def create_unicode_map(translations: dict[str, dict]) -> dict[str, dict]:
    return {glyph_to_unicode(glyph): data for glyph, data in translations.items()}


def unicode_variants(unicode: str) -> list[str]:
    return [unicode, unicode.replace("-", ""), unicode.lower(), unicode.upper()]


def match_translation(emoji: dict, translations: dict, unicode_map: dict) -> tuple[dict | None, str | None]:
    """Find the translation for a compact record.

    Returns ``(translation, strategy)`` with strategy ``"glyph"``,
    ``"unicode"`` or None when nothing matched.
    """
    glyph = emoji.get("gl", "")
    if glyph and glyph in translations:
        return translations[glyph], "glyph"

    unicode = emoji.get("u", "")
    if not unicode:
        return None, None

    for variant in unicode_variants(unicode):
        if variant in unicode_map:
            return unicode_map[variant], "unicode"
        generated = unicode_to_glyph(variant)
        if generated and generated in translations:
            return translations[generated], "unicode"
    return None, None


def integrate_translations(index: dict, translations: dict[str, dict], locale: str) -> tuple[dict, dict]:
    """
    Attach ``i18n[locale]`` to every record of a compact index.

    Records without a match get a copy of their English fields so every
    emoji has an entry for the locale. ``index`` is not modified.

    Returns:
        (overlay: dict, stats: dict)
    """
    overlay = copy.deepcopy(index)
    unicode_map = create_unicode_map(translations)
    stats = {"glyph": 0, "unicode": 0, "unmatched": 0}

    for emoji in overlay.get("e", []):
        translation, strategy = match_translation(emoji, translations, unicode_map)
        i18n = emoji.setdefault("i18n", {})

        if translation is not None:
            stats[strategy] += 1
            i18n[locale] = {
                "n": translation["name"],
                "k": list(translation["keywords"]),
                "t": translation["tts"],
            }
        else:
            stats["unmatched"] += 1
            i18n[locale] = {"n": emoji.get("n", ""), "k": list(emoji.get("k") or []), "t": emoji.get("t", "")}

    overlay["ec"] = group_by_category(overlay.get("e", []), overlay.get("c", []), group_key="gr")
    return overlay, stats


def report_stats(stats: dict) -> None:
    matched = stats["glyph"] + stats["unicode"]
    total = matched + stats["unmatched"]
    rate = (matched / total * 100) if total else 0.0
    print(f"   Matched by glyph: {stats['glyph']}")
    print(f"   Matched by unicode: {stats['unicode']}")
    print(f"   Unmatched: {stats['unmatched']}")
    print(f"   Match rate: {rate:.1f}%")


def find_annotation_files(cldr_dir: Path) -> list[tuple[str, Path]]:
    """Return ``(cldr_lang, path)`` for every ``annotations-<lang>.json`` in cldr_dir."""
    found = []
    for path in sorted(Path(cldr_dir).glob("annotations-*.json")):
        match = ANNOTATION_FILE_RE.match(path.name)
        if match:
            found.append((match.group(1), path))
    return found


def write_overlay(index: dict, cldr_file_path: Path, locale: str, output_path: Path) -> dict | None:
    """Build the overlay for ``locale`` and write it; None if the CLDR file had nothing."""
    translations = process_cldr(cldr_file_path)
    if not translations:
        print(f"ERROR: No translations found for {locale}", file=sys.stderr)
        return None

    overlay, stats = integrate_translations(index, translations, locale)
    write_index(overlay, output_path)
    report_stats(stats)
    print(f"   Output: {output_path}")
    return stats
