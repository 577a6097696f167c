"""
Command-line validator for Belgian INSZ/NISS numbers.

Usage:
    python -m belgian_insz 85.06.13-001.78
    python -m belgian_insz 85061300178 85273003371 --format json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .models import InszValidationResult
from .validator import validate


def _describe(raw: str, result: InszValidationResult) -> str:
    number = result.insz_number
    label = (number.formatted() if number else None) or raw
    if not result.is_valid:
        return f"{label}  INVALID  {', '.join(e.value for e in result.errors)}"
    assert number is not None
    details: list[str] = []
    if number.is_bis:
        details.append("bis")
    if number.birth_date is not None:
        details.append(number.birth_date.isoformat())
    elif number.birth_year is not None:
        details.append(str(number.birth_year))
    else:
        details.append("birth date unknown")
    if number.sex is not None:
        details.append(f"sex={number.sex.value}")
    return f"{label}  VALID  {' '.join(details)}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="belgian_insz", description="Validate Belgian INSZ/NISS numbers"
    )
    parser.add_argument("numbers", nargs="+", help="Numbers to validate")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr)

    all_valid = True
    for raw in args.numbers:
        result = validate(raw)
        all_valid = all_valid and result.is_valid
        if args.format == "json":
            print(json.dumps({"input": raw, **result.to_dict()}))
        else:
            print(_describe(raw, result))
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
