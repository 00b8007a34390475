"""portfolio_qa.contracts.models

Shared models for the matcher, the storage backends, the HTTP layer and the UI.

Wire format is camelCase (answerType, matchedAnswerId, createdAt); `to_dict()` produces it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Optional

ConfidenceTier = Literal["high", "medium", "low"]
QuestionStatus = Literal["pending", "matched", "review", "no_match"]
FallbackType = Literal["personal", "market", "financial_advice", "portfolio"]
Sentiment = Literal["up", "down"]

FEEDBACK_REASONS = (
    "incorrect_data",
    "outdated",
    "not_relevant",
    "unclear",
    "missing_info",
    "wrong_timeframe",
    "wrong_accounts",
    "other",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt else None


@dataclass
class AnswerRecord:
    """A pre-authored answer. Keywords/phrases keep stored casing; matching lower-cases them."""
    id: str
    title: str
    content: str
    category: Optional[str] = None
    keywords: list[str] = field(default_factory=list)
    phrases: list[str] = field(default_factory=list)
    answer_type: Optional[str] = None
    data: Any = None
    is_active: bool = True
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "keywords": list(self.keywords),
            "phrases": list(self.phrases),
            "answerType": self.answer_type,
            "data": self.data,
            "isActive": self.is_active,
            "createdAt": _iso(self.created_at),
        }

    def summary(self) -> dict[str, Any]:
        """Answer as embedded in a question response (no matching metadata)."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "answerType": self.answer_type,
            "data": self.data,
        }


@dataclass
class NewAnswer:
    """Administrative create payload; the store assigns id and timestamps."""
    title: str
    content: str
    category: Optional[str] = None
    keywords: list[str] = field(default_factory=list)
    phrases: list[str] = field(default_factory=list)
    answer_type: Optional[str] = None
    data: Any = None


@dataclass
class QuestionContext:
    """Account selection the question was asked against."""
    accounts: list[str] = field(default_factory=list)
    timeframe: Optional[str] = None
    selection_mode: Optional[Literal["accounts", "group"]] = None

    def to_dict(self) -> dict[str, Any]:
        return {"accounts": list(self.accounts), "timeframe": self.timeframe, "selectionMode": self.selection_mode}


@dataclass
class QuestionRequest:
    """Incoming question. `placeholders` only ever touch the scoring text."""
    question: str
    context: Optional[QuestionContext] = None
    placeholders: Optional[dict[str, str]] = None


@dataclass
class QuestionRecord:
    """A logged question and its lifecycle status."""
    id: str
    question: str
    context: Optional[dict[str, Any]] = None
    status: QuestionStatus = "pending"
    matched_answer_id: Optional[str] = None
    confidence: Optional[ConfidenceTier] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "context": self.context,
            "status": self.status,
            "matchedAnswerId": self.matched_answer_id,
            "confidence": self.confidence,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


@dataclass
class NewFeedback:
    sentiment: Sentiment
    answer_id: Optional[str] = None
    question_id: Optional[str] = None
    question: Optional[str] = None
    reasons: list[str] = field(default_factory=list)
    comment: Optional[str] = None


@dataclass
class FeedbackRecord:
    """Thumbs up/down on a previously returned answer."""
    id: str
    sentiment: Sentiment
    answer_id: Optional[str] = None
    question_id: Optional[str] = None
    question: Optional[str] = None
    reasons: list[str] = field(default_factory=list)
    comment: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "answerId": self.answer_id,
            "questionId": self.question_id,
            "question": self.question,
            "sentiment": self.sentiment,
            "reasons": list(self.reasons),
            "comment": self.comment,
            "createdAt": _iso(self.created_at),
        }


@dataclass
class MatchResult:
    """Best catalog answer for one question."""
    answer: AnswerRecord
    confidence_score: int
    confidence_tier: ConfidenceTier


@dataclass
class Classification:
    """Fallback category for a question the matcher could not answer."""
    type: FallbackType
    title: str
    message: str
    action_text: Optional[str] = None

    @property
    def needs_review(self) -> bool:
        return self.type == "financial_advice"


@dataclass
class QuestionOutcome:
    """Envelope returned to the caller plus the debug traces of the run."""
    envelope: dict[str, Any]
    traces: list[dict[str, Any]] = field(default_factory=list)

    @property
    def status(self) -> str:
        return self.envelope["status"]
