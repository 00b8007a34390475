"""portfolio_qa.catalog.loader

Loads an answer catalog from a JSON file, and checks catalogs for obvious authoring mistakes.

File shape (camelCase, like the HTTP API):
  {"answers": [{"id": "1", "title": "...", "content": "...", "keywords": [...], "phrases": [...],
                "category": "...", "answerType": "...", "data": {...}}]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from portfolio_qa.catalog.default_catalog import default_catalog
from portfolio_qa.contracts.models import AnswerRecord
from portfolio_qa.errors import CatalogError


def _str_list(raw: Any, field_name: str, idx: int) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise CatalogError(f"answers[{idx}].{field_name} must be a list of strings")
    return list(raw)


def answer_from_dict(obj: dict[str, Any], idx: int = 0) -> AnswerRecord:
    if not isinstance(obj, dict):
        raise CatalogError(f"answers[{idx}] must be an object")
    title = str(obj.get("title") or "").strip()
    content = str(obj.get("content") or "").strip()
    if not title or not content:
        raise CatalogError(f"answers[{idx}] needs a non-empty title and content")
    return AnswerRecord(
        id=str(obj.get("id") or idx + 1),
        title=title,
        content=content,
        category=obj.get("category"),
        keywords=_str_list(obj.get("keywords"), "keywords", idx),
        phrases=_str_list(obj.get("phrases"), "phrases", idx),
        answer_type=obj.get("answerType"),
        data=obj.get("data"),
        is_active=bool(obj.get("isActive", True)),
    )


def load_catalog(path: Optional[str] = None) -> list[AnswerRecord]:
    """Load the catalog at `path`, or the built-in one when no path is given."""
    if not path:
        return default_catalog()
    p = Path(path).expanduser()
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {p}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {p}: {e}") from e

    items = obj.get("answers") if isinstance(obj, dict) else obj
    if not isinstance(items, list):
        raise CatalogError("Catalog must be a list or an object with an 'answers' list")
    return [answer_from_dict(item, i) for i, item in enumerate(items)]


def validate_catalog(answers: list[AnswerRecord]) -> list[str]:
    """Return a list of problems; empty means the catalog looks usable."""
    problems: list[str] = []
    seen: set[str] = set()
    for a in answers:
        if a.id in seen:
            problems.append(f"Duplicate answer id: {a.id}")
        seen.add(a.id)
        if not a.keywords and not a.phrases:
            problems.append(f"Answer {a.id} has no keywords or phrases and can never match")
        if any(not k.strip() for k in a.keywords + a.phrases):
            # an empty string is a substring of every question
            problems.append(f"Answer {a.id} has a blank keyword or phrase")
    return problems
