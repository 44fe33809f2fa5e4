#!/usr/bin/env python3
"""
objectid CLI — Generate and inspect identifiers.

Usage:
    python -m tools.objectid_cli generate
    python -m tools.objectid_cli generate --slim --count 5
    python -m tools.objectid_cli generate --timestamp 1700000000
    python -m tools.objectid_cli inspect <hex>

Commands:
    generate — Print new identifiers, one per line
    inspect  — Decode a hex identifier into its layout fields
"""

import argparse
import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from objectid_core import (
    DEFAULT_ALPHABET,
    decode,
    from_hex,
    get_default_generator,
    setup_logging,
)


# ============================================================
# Generate command
# ============================================================

def cmd_generate(
    count: int = 1,
    slim: bool = False,
    timestamp: float | None = None,
    alphabet: str = DEFAULT_ALPHABET,
) -> None:
    """Print count identifiers from the default generator."""
    generator = get_default_generator()
    for _ in range(count):
        if slim:
            print(generator.slim(timestamp, alphabet))
        else:
            print(generator.hex(timestamp))


# ============================================================
# Inspect command
# ============================================================

def cmd_inspect(text: str) -> None:
    """Render the layout fields of a hex identifier."""
    fields = decode(from_hex(text))
    print(f"  id:          {text.lower()}")
    print(f"  timestamp:   {fields.timestamp} "
          f"({fields.generated_at.strftime('%Y-%m-%dT%H:%M:%SZ')})")
    print(f"  machine_id:  {fields.machine_id:06x}")
    print(f"  process_id:  {fields.process_id:04x}")
    print(f"  counter:     {fields.counter:06x} ({fields.counter})")


# ============================================================
# Main
# ============================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="objectid CLI — Identifier generator and inspector",
        prog="python -m tools.objectid_cli",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print new identifiers")
    gen.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="Number of identifiers to print (default: 1)",
    )
    gen.add_argument(
        "--slim", "-s",
        action="store_true",
        help="Use the 64-symbol slim encoding instead of hex",
    )
    gen.add_argument(
        "--timestamp", "-t",
        type=float,
        default=None,
        help="Unix timestamp in seconds (default: now)",
    )
    gen.add_argument(
        "--alphabet", "-a",
        default=DEFAULT_ALPHABET,
        help="64-character alphabet for --slim",
    )

    insp = sub.add_parser("inspect", help="Decode a hex identifier")
    insp.add_argument("identifier", help="24-character hex identifier")

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        if args.command == "generate":
            cmd_generate(
                count=args.count,
                slim=args.slim,
                timestamp=args.timestamp,
                alphabet=args.alphabet,
            )
        elif args.command == "inspect":
            cmd_inspect(args.identifier)
    except ValueError as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
