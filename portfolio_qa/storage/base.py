"""portfolio_qa.storage.base

Storage interface for answers, logged questions and feedback.

The matcher never touches storage directly: the service reads the active catalog from the
store and passes it in at call time.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from portfolio_qa.contracts.models import (
    AnswerRecord,
    ConfidenceTier,
    FeedbackRecord,
    NewAnswer,
    NewFeedback,
    QuestionRecord,
    QuestionStatus,
)


class AnswerStore(ABC):
    # Answers
    @abstractmethod
    def get_all_answers(self) -> list[AnswerRecord]:
        """All answers in catalog (insertion) order."""
        raise NotImplementedError

    @abstractmethod
    def get_answer(self, answer_id: str) -> Optional[AnswerRecord]:
        raise NotImplementedError

    @abstractmethod
    def create_answer(self, answer: NewAnswer) -> AnswerRecord:
        raise NotImplementedError

    @abstractmethod
    def seed_answers(self, answers: list[AnswerRecord]) -> int:
        """Insert catalog records keeping their ids; existing ids are left untouched."""
        raise NotImplementedError

    def get_active_answers(self) -> list[AnswerRecord]:
        return [a for a in self.get_all_answers() if a.is_active]

    def get_answers_by_category(self, category: str) -> list[AnswerRecord]:
        want = (category or "").strip().lower()
        return [a for a in self.get_all_answers() if (a.category or "").lower() == want]

    # Questions
    @abstractmethod
    def create_question(self, question: str, context: Optional[dict[str, Any]] = None) -> QuestionRecord:
        """Log a question with status `pending`."""
        raise NotImplementedError

    @abstractmethod
    def get_question(self, question_id: str) -> Optional[QuestionRecord]:
        raise NotImplementedError

    @abstractmethod
    def update_question_status(
        self,
        question_id: str,
        status: QuestionStatus,
        matched_answer_id: Optional[str] = None,
        confidence: Optional[ConfidenceTier] = None,
    ) -> Optional[QuestionRecord]:
        """Return the updated record, or None for an unknown id."""
        raise NotImplementedError

    @abstractmethod
    def get_questions_for_review(self) -> list[QuestionRecord]:
        raise NotImplementedError

    # Feedback
    @abstractmethod
    def store_feedback(self, feedback: NewFeedback) -> FeedbackRecord:
        raise NotImplementedError

    @abstractmethod
    def get_all_feedback(self) -> list[FeedbackRecord]:
        raise NotImplementedError
