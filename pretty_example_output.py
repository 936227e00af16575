"""
Summarize one or more saved comparisons (from `tirecalc compare --output`).

Usage:
    python pretty_example_output.py
    python pretty_example_output.py results/*.json --max-items 6
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from tirecalc.cli.readable_output import print_readable_output
from tirecalc.models.outputs import ComparisonResult


def _check(path: Path) -> str | None:
    """Reason a file can't be summarized, or None when it can."""
    if not path.is_file():
        return "no such file"
    try:
        ComparisonResult.model_validate_json(path.read_text())
    except ValidationError as exc:
        return f"not a comparison result ({exc.error_count()} errors)"
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Summarize saved tire comparison results"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path("example_output.json")],
        metavar="RESULT_JSON",
        help="Comparison result files (default: example_output.json)",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=4,
        help="List entries shown per section",
    )
    args = parser.parse_args(argv)

    failures = 0
    for index, path in enumerate(args.paths):
        problem = _check(path)
        if problem:
            print(f"{path}: {problem}", file=sys.stderr)
            failures += 1
            continue
        if len(args.paths) > 1:
            if index:
                print()
            print(f"=== {path.name} ===")
        print_readable_output(path, max_items=args.max_items)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
