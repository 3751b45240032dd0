#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Convert emoji index files (JSON format) to CBOR format.

This script writes a .cbor twin next to every emoji-index*.json file
so the index can be loaded with load_catalog(..., suffix=".cbor").

Usage:
    python scripts/convert_index_to_cbor.py [--data-dir data]
"""

import argparse
import sys
from pathlib import Path

from emojidir.storage import INDEX_STEM, convert_json_to_cbor


def find_project_root():
    """Find project root directory."""
    script_dir = Path(__file__).parent
    return script_dir.parent


def main():
    parser = argparse.ArgumentParser(description="Convert emoji index files to CBOR.")
    parser.add_argument("--data-dir", type=Path, default=find_project_root() / "data")
    args = parser.parse_args()
    data_dir = args.data_dir

    if not data_dir.exists():
        print(f"ERROR: Directory not found: {data_dir}")
        return 1

    index_files = sorted(data_dir.glob(f"{INDEX_STEM}*.json"))

    if not index_files:
        print(f"ERROR: No index files found in {data_dir}")
        return 1

    print(f"Found {len(index_files)} index files to convert...\n")

    success_count = 0
    failed = []

    for index_file in index_files:
        output_path = index_file.with_suffix(".cbor")
        print(f"Converting {index_file.name}...")

        # Convert via a temp file, then replace
        temp_path = index_file.with_suffix(".cbor.tmp")
        success, message = convert_json_to_cbor(index_file, temp_path)

        if success:
            temp_path.replace(output_path)
            print(f"  ✓ {message}")
            success_count += 1
        else:
            if temp_path.exists():
                temp_path.unlink()
            print(f"  ✗ {message}")
            failed.append(index_file.name)

        print()

    print("=" * 60)
    print(f"Converted: {success_count}/{len(index_files)} index files")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    else:
        print("All index files converted successfully!")

    return 0 if not failed else 1


if __name__ == "__main__":
    sys.exit(main())
