"""portfolio_qa.storage.memory

In-memory store (default backend).

Dicts keep insertion order, which is the catalog order the matcher's tie-break relies on.
Writers are serialized with a lock; readers get list copies.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Optional

from portfolio_qa.contracts.models import (
    AnswerRecord,
    ConfidenceTier,
    FeedbackRecord,
    NewAnswer,
    NewFeedback,
    QuestionRecord,
    QuestionStatus,
    utcnow,
)
from portfolio_qa.storage.base import AnswerStore


def new_id() -> str:
    return uuid.uuid4().hex


class InMemoryStore(AnswerStore):
    def __init__(self, answers: Optional[list[AnswerRecord]] = None):
        self._lock = threading.Lock()
        self._answers: Dict[str, AnswerRecord] = {}
        self._questions: Dict[str, QuestionRecord] = {}
        self._feedback: Dict[str, FeedbackRecord] = {}
        if answers:
            self.seed_answers(answers)

    def get_all_answers(self) -> list[AnswerRecord]:
        return list(self._answers.values())

    def get_answer(self, answer_id: str) -> Optional[AnswerRecord]:
        return self._answers.get(answer_id)

    def create_answer(self, answer: NewAnswer) -> AnswerRecord:
        rec = AnswerRecord(
            id=new_id(),
            title=answer.title,
            content=answer.content,
            category=answer.category,
            keywords=list(answer.keywords),
            phrases=list(answer.phrases),
            answer_type=answer.answer_type,
            data=answer.data,
        )
        with self._lock:
            self._answers[rec.id] = rec
        return rec

    def seed_answers(self, answers: list[AnswerRecord]) -> int:
        added = 0
        with self._lock:
            for a in answers:
                if a.id not in self._answers:
                    self._answers[a.id] = a
                    added += 1
        return added

    def create_question(self, question: str, context: Optional[dict[str, Any]] = None) -> QuestionRecord:
        rec = QuestionRecord(id=new_id(), question=question, context=context)
        with self._lock:
            self._questions[rec.id] = rec
        return rec

    def get_question(self, question_id: str) -> Optional[QuestionRecord]:
        return self._questions.get(question_id)

    def update_question_status(
        self,
        question_id: str,
        status: QuestionStatus,
        matched_answer_id: Optional[str] = None,
        confidence: Optional[ConfidenceTier] = None,
    ) -> Optional[QuestionRecord]:
        with self._lock:
            current = self._questions.get(question_id)
            if current is None:
                return None
            updated = replace(
                current,
                status=status,
                matched_answer_id=matched_answer_id or current.matched_answer_id,
                confidence=confidence or current.confidence,
                updated_at=utcnow(),
            )
            self._questions[question_id] = updated
            return updated

    def get_questions_for_review(self) -> list[QuestionRecord]:
        return [q for q in list(self._questions.values()) if q.status == "review"]

    def store_feedback(self, feedback: NewFeedback) -> FeedbackRecord:
        rec = FeedbackRecord(
            id=new_id(),
            sentiment=feedback.sentiment,
            answer_id=feedback.answer_id,
            question_id=feedback.question_id,
            question=feedback.question,
            reasons=list(feedback.reasons),
            comment=feedback.comment,
        )
        with self._lock:
            self._feedback[rec.id] = rec
        return rec

    def get_all_feedback(self) -> list[FeedbackRecord]:
        return list(self._feedback.values())
