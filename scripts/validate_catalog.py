"""scripts.validate_catalog

Validates an answer catalog JSON file (structure, unique ids, matchable records).

Usage:
  python scripts/validate_catalog.py --catalog /path/to/answers.json
  python scripts/validate_catalog.py            # checks the built-in catalog
"""

from __future__ import annotations

import argparse

from portfolio_qa.env_loader import load_env
from portfolio_qa.catalog.loader import load_catalog, validate_catalog


def main(argv: list[str] | None = None) -> int:
    load_env()  # load .env if present
    ap = argparse.ArgumentParser()
    ap.add_argument("--catalog", default=None, help="JSON catalog file; defaults to the built-in catalog")
    args = ap.parse_args(argv)

    answers = load_catalog(args.catalog)
    problems = validate_catalog(answers)
    for p in problems:
        print(f"ERROR {p}")
    if problems:
        return 1
    print(f"OK ({len(answers)} answers)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
