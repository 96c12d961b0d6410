#!/usr/bin/env python3
import sys
from pathlib import Path

from palred.errors import DecodeError
from palred.file_utils import read_png_metadata


def extract_png_metadata(filepath: Path) -> int:
    """
    Prints the colorreducer metadata embedded in a PNG file.
    """
    print(f"--- colorreducer metadata for PNG: {filepath.name} ---")
    try:
        metadata = read_png_metadata(filepath)
    except DecodeError as e:
        print(f"Error: {e}")
        return 1

    if not metadata:
        print("  No colorreducer-specific metadata found.")
    for key, value in metadata.items():
        print(f"  {key}: {value}")
    print("-" * (36 + len(filepath.name)))
    return 0


def main():
    if len(sys.argv) < 2:
        print("Usage: python extract_colorreducer_meta.py <filename.png>")
        sys.exit(1)

    filepath = Path(sys.argv[1])

    if not filepath.is_file():
        print(f"Error: File not found: {filepath}")
        sys.exit(1)

    if filepath.suffix.lower() != ".png":
        print(f"Error: Unsupported file type '{filepath.suffix.lower()}'. Please provide a .png file.")
        sys.exit(1)

    sys.exit(extract_png_metadata(filepath))

if __name__ == "__main__":
    main()
