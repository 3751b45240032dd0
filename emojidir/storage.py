"""Read and write emoji index files as JSON or CBOR."""

from __future__ import annotations

import json
from pathlib import Path

import cbor2

INDEX_STEM = "emoji-index"


def index_path(data_dir: Path, locale: str | None = None, suffix: str = ".json") -> Path:
    """Return ``emoji-index.json`` or ``emoji-index-<locale>.json`` under data_dir."""
    name = INDEX_STEM if not locale else f"{INDEX_STEM}-{locale}"
    return Path(data_dir) / f"{name}{suffix}"


def read_index(path: Path) -> dict:
    path = Path(path)
    if path.suffix == ".cbor":
        with open(path, "rb") as f:
            return cbor2.load(f)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_index(data: dict, path: Path, indent: int | None = 2) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".cbor":
        with open(path, "wb") as f:
            cbor2.dump(data, f)
        return
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)


def convert_json_to_cbor(input_path: Path, output_path: Path) -> tuple[bool, str]:
    """
    Convert a JSON index file to CBOR format.

    Returns:
        (success: bool, message: str)
    """
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        with open(output_path, "wb") as f:
            cbor2.dump(data, f)

        json_size = Path(input_path).stat().st_size / 1024
        cbor_size = Path(output_path).stat().st_size / 1024
        reduction = (1 - cbor_size / json_size) * 100 if json_size else 0.0

        return True, f"JSON: {json_size:.1f} KB → CBOR: {cbor_size:.1f} KB ({reduction:.1f}% smaller)"

    except json.JSONDecodeError as e:
        return False, f"JSON parse error: {e}"
    except (OSError, ValueError, cbor2.CBOREncodeError) as e:
        # UnicodeDecodeError is a ValueError
        return False, f"Error: {e}"
