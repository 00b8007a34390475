"""portfolio_qa.matching.envelope

Turns a MatchResult (or a fallback Classification) into the wire-level question response.

matched  -> answer + confidence + "Found <tier> confidence match"
review   -> message only (answer omitted), question waits in the advisor queue
no_match -> synthesized fallback answer flagged with data.isUnmatched
"""

from __future__ import annotations
from typing import Any

from portfolio_qa.contracts.models import Classification, MatchResult, QuestionStatus


def status_for(classification: Classification) -> QuestionStatus:
    return "review" if classification.needs_review else "no_match"


def matched_envelope(question_id: str, match: MatchResult) -> dict[str, Any]:
    return {
        "id": question_id,
        "status": "matched",
        "answer": match.answer.summary(),
        "confidence": match.confidence_tier,
        "message": f"Found {match.confidence_tier} confidence match",
    }


def fallback_answer(classification: Classification) -> dict[str, Any]:
    return {
        "id": f"fallback-{classification.type}",
        "title": classification.title,
        "content": classification.message,
        "category": "Fallback",
        "answerType": classification.type,
        "data": {
            "fallbackType": classification.type,
            "actionText": classification.action_text,
            "isUnmatched": True,
        },
    }


def fallback_envelope(question_id: str, classification: Classification) -> dict[str, Any]:
    status = status_for(classification)
    envelope: dict[str, Any] = {
        "id": question_id,
        "status": status,
        "message": classification.message,
    }
    if status == "no_match":
        envelope["answer"] = fallback_answer(classification)
    return envelope
