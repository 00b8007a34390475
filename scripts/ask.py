"""scripts.ask

Ask one question from the command line and print the response envelope.

Usage:
  python scripts/ask.py "What's the YTD performance vs {benchmark}?" --placeholder benchmark="S&P 500"
  python scripts/ask.py "Show me risk metrics" --scores
"""

from __future__ import annotations

import argparse
import json

from portfolio_qa.contracts.models import QuestionRequest
from portfolio_qa.main import build_service
from portfolio_qa.tracing import find_step


def _parse_placeholders(items: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise SystemExit(f"--placeholder expects key=value, got {item!r}")
        out[key] = value
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("question")
    ap.add_argument("--placeholder", action="append", default=[], help="key=value, repeatable")
    ap.add_argument("--scores", action="store_true", help="print per-answer scores")
    args = ap.parse_args(argv)

    service = build_service()
    outcome = service.ask(QuestionRequest(question=args.question, placeholders=_parse_placeholders(args.placeholder)))
    print(json.dumps(outcome.envelope, indent=2, default=str))

    if args.scores:
        scored = find_step(outcome.traces, "score") or {}
        for s in scored.get("scores", []):
            print(f"{s['answerId']:>40}  {s['score']:>4}  phrases={s['phrases']} keywords={s['keywords']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
