#!/usr/bin/env python3
"""Print the digest of a file, optionally salted.

Usage:
    python scripts/hash_file.py <path> [algorithm] [salt-length]

The algorithm defaults to HASHGEN_DEFAULT_ALGORITHM (sha256).  With a salt
length, random salt of that many bytes is prepended and printed as hex.
"""
import sys
from pathlib import Path

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from hash_generator.config import get_settings
from hash_generator.generator import HashGenerator
from hash_generator.utils.logging import setup_logging


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/hash_file.py <path> [algorithm] [salt-length]")
        print()
        print("Example:")
        print("  python scripts/hash_file.py ~/Downloads/release.tar.gz sha512 16")
        sys.exit(1)

    setup_logging(get_settings().log_level, json_output=False)

    path = Path(sys.argv[1]).expanduser()
    if not path.exists():
        print(f"Error: File not found: {path}")
        sys.exit(1)

    try:
        generator = HashGenerator(sys.argv[2] if len(sys.argv) > 2 else None)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if len(sys.argv) > 3:
        try:
            salt_length = int(sys.argv[3])
            generator.prepend_salt(length=salt_length)
        except ValueError as e:
            print(f"Error: Invalid salt length {sys.argv[3]!r}: {e}")
            sys.exit(1)

    digest = generator.hash_data(path.read_bytes())

    print(f"Algorithm: {digest.algorithm.description}")
    if digest.prepended_salt is not None:
        print(f"Salt:      {digest.prepended_salt.hex()}")
    print(f"Digest:    {digest}")


if __name__ == "__main__":
    main()
