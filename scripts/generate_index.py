#!/usr/bin/env python3
"""Generate data/emoji-index.json from the emoji asset folders.

Every folder under assets/fluent-emoji/ with a metadata.json becomes one
record. Afterwards every assets/cldr/annotations-<lang>.json found is turned
into a data/emoji-index-<locale>.json overlay and copied to public/data/ so
the site can serve it as a static file.

Usage:
    python scripts/generate_index.py
    python scripts/generate_index.py --assets-dir path/to/fluent-emoji --skip-cldr
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from emojidir.cldr import find_annotation_files, locale_for_cldr_lang, write_overlay
from emojidir.generator import build_index
from emojidir.storage import index_path, write_index


def repo_root_from_script() -> Path:
    return Path(__file__).resolve().parents[1]


def process_translations(index: dict, cldr_dir: Path, data_dir: Path, public_dir: Path | None) -> list[str]:
    """Write an overlay per CLDR file; returns the locales that failed."""
    annotation_files = find_annotation_files(cldr_dir)
    print(f"Found {len(annotation_files)} CLDR files")

    failed = []
    for cldr_lang, cldr_path in annotation_files:
        locale = locale_for_cldr_lang(cldr_lang)
        print(f"\nProcessing {locale} ({cldr_lang})...")

        output_path = index_path(data_dir, locale)
        if write_overlay(index, cldr_path, locale, output_path) is None:
            failed.append(locale)
            continue

        if public_dir is not None:
            public_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(output_path, public_dir / output_path.name)
            print(f"   Copied to {public_dir}")
    return failed


def main() -> int:
    root = repo_root_from_script()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--assets-dir", type=Path, default=root / "assets" / "fluent-emoji")
    parser.add_argument("--cldr-dir", type=Path, default=root / "assets" / "cldr")
    parser.add_argument("--data-dir", type=Path, default=root / "data")
    parser.add_argument("--public-dir", type=Path, default=root / "public" / "data")
    parser.add_argument("--skip-cldr", action="store_true", help="Only build the base index")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    args = parser.parse_args()

    if not args.assets_dir.is_dir():
        print(f"ERROR: Directory not found: {args.assets_dir}", file=sys.stderr)
        return 1

    print("Scanning emoji assets...")
    index, stats = build_index(args.assets_dir)
    output_path = index_path(args.data_dir)
    write_index(index, output_path, indent=args.indent)

    print("Index generated!")
    print(f"   Emojis: {stats['emojis']}")
    print(f"   Categories: {stats['categories']}")
    print(f"   Skipped: {len(stats['skipped'])}")
    print(f"   Output: {output_path}")

    if args.skip_cldr:
        return 0
    if not args.cldr_dir.is_dir():
        print("\nNo CLDR directory found, skipping translations")
        return 0

    failed = process_translations(index, args.cldr_dir, args.data_dir, args.public_dir)
    if failed:
        print(f"\nFailed: {', '.join(failed)}", file=sys.stderr)
        return 1
    print("\nAll translations processed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
