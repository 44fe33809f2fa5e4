#!/usr/bin/env python3
"""
objectid Demo — Generating, encoding and decoding identifiers

Walks through:
  1. Default entry point and the two string encodings
  2. Byte layout of a raw identifier
  3. A generator with deterministic random source and clock
  4. Slim encoding with a custom alphabet

Run:
    python examples/demo_objectid.py

Requirements:
    pip install pydantic
"""

import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from objectid_core import (
    ObjectIdGenerator,
    construct,
    decode,
    objectid,
    slim_id,
    to_hex,
    to_slim,
)

URL_SAFE = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


def section(title: str) -> None:
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def main():
    section("1. Default entry point")
    print(f"  objectid():  {objectid()}")
    print(f"  slim_id():   {slim_id()}")

    section("2. Raw layout")
    raw = construct()
    fields = decode(raw)
    h = to_hex(raw)
    print(f"  hex:         {h}")
    print(f"  timestamp:   {h[0:8]}  -> {fields.generated_at.isoformat()}")
    print(f"  machine_id:  {h[8:14]}")
    print(f"  process_id:  {h[14:18]}")
    print(f"  counter:     {h[18:24]}")

    section("3. Deterministic generator")
    gen = ObjectIdGenerator(
        random_source=lambda n: bytes(n),
        clock=lambda: 1700000000.0,
    )
    for _ in range(3):
        print(f"  {gen.hex()}  {gen.slim()}")

    section("4. Custom alphabet")
    print(f"  {to_slim(raw)}  (default)")
    print(f"  {to_slim(raw, URL_SAFE)}  (url-safe base64 order)")


if __name__ == "__main__":
    main()
