#!/usr/bin/env python3
"""Build per-locale emoji index overlays from Unicode CLDR annotations.

Reads data/emoji-index.json and assets/cldr/annotations-<lang>.json and
writes data/emoji-index-<locale>.json for every requested locale.

Usage:
    python scripts/process_cldr.py zh-CN ja
    python scripts/process_cldr.py ko --fetch
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from emojidir.cldr import annotation_filename, cldr_lang_for_locale, fetch_cldr_annotations, write_overlay
from emojidir.labels import LOCALES
from emojidir.storage import index_path, read_index


def repo_root_from_script() -> Path:
    return Path(__file__).resolve().parents[1]


def main() -> int:
    root = repo_root_from_script()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "locales",
        nargs="+",
        help=f"Site locales to process (supported: {' '.join(LOCALES)})",
    )
    parser.add_argument("--data-dir", type=Path, default=root / "data", help="Directory holding emoji-index.json")
    parser.add_argument("--cldr-dir", type=Path, default=root / "assets" / "cldr", help="Directory of CLDR annotation files")
    parser.add_argument("--fetch", action="store_true", help="Download the CLDR annotations before processing")
    args = parser.parse_args()

    base_path = index_path(args.data_dir)
    try:
        index = read_index(base_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not read base index '{base_path}': {e}", file=sys.stderr)
        return 1

    failed = []
    for locale in args.locales:
        cldr_lang = cldr_lang_for_locale(locale)
        cldr_path = args.cldr_dir / annotation_filename(cldr_lang)
        print(f"\nProcessing {locale} ({cldr_lang})...")

        if args.fetch:
            try:
                fetch_cldr_annotations(cldr_lang, cldr_path)
                print(f"   Downloaded {cldr_path}")
            except (OSError, ValueError) as e:
                print(f"ERROR: Could not download CLDR data for {cldr_lang}: {e}", file=sys.stderr)
                failed.append(locale)
                continue

        if write_overlay(index, cldr_path, locale, index_path(args.data_dir, locale)) is None:
            failed.append(locale)

    if failed:
        print(f"\nFailed: {', '.join(failed)}", file=sys.stderr)
        return 1
    print("\nDone.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
