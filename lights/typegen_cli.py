"""Command that turns a definition file into a generated header."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from lights.typegen import DefinitionError, generate

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lights-typegen",
        description="Generate a header from a type definition file.",
    )
    parser.add_argument("definition", type=Path, help="definition file to read")
    parser.add_argument("output", type=Path, help="header file to write")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Read the definition file, generate the header and write it out."""
    args = _parser().parse_args(argv)

    try:
        text = args.definition.read_text(encoding="utf-8")
    except OSError:
        print(f"Failed to open file: {args.definition}", file=sys.stderr)
        return 1

    try:
        generated = generate(text)
    except DefinitionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        args.output.write_text(generated, encoding="utf-8")
    except OSError:
        print(f"Failed to open file: {args.output}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())