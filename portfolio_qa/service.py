"""portfolio_qa.service

Question service: the one place every entry point (HTTP, Streamlit, CLI) goes through.

Flow per question:
1. Log the question as `pending` (verbatim text, placeholders never applied).
   If anything below raises, the record is moved to `no_match` before the error propagates.
2. Score the active catalog with the matcher.
3. Matched -> `matched`; otherwise classify and mark `review` or `no_match`.
4. Return the wire envelope plus debug traces.
"""

from __future__ import annotations

from typing import Optional

from portfolio_qa.catalog.loader import validate_catalog
from portfolio_qa.contracts.models import (
    AnswerRecord,
    FeedbackRecord,
    NewAnswer,
    NewFeedback,
    QuestionOutcome,
    QuestionRecord,
    QuestionRequest,
)
from portfolio_qa.errors import NotFoundError
from portfolio_qa.matching.classifier import classify_question
from portfolio_qa.matching.envelope import fallback_envelope, matched_envelope, status_for
from portfolio_qa.matching.matcher import normalize_question, pick_best, score_catalog
from portfolio_qa.storage.base import AnswerStore
from portfolio_qa.tracing import TraceCollector


class QuestionService:
    def __init__(self, store: AnswerStore, logger):
        self.store = store
        self.logger = logger

    def ask(self, req: QuestionRequest) -> QuestionOutcome:
        tracer = TraceCollector()
        context = req.context.to_dict() if req.context else None
        record = self.store.create_question(req.question, context)
        try:
            return self._answer(record.id, req, tracer)
        except Exception:
            self.logger.exception("question %s failed; marking no_match", record.id)
            self.store.update_question_status(record.id, "no_match")
            raise

    def _answer(self, question_id: str, req: QuestionRequest, tracer: TraceCollector) -> QuestionOutcome:
        catalog = self.store.get_active_answers()
        text = normalize_question(req.question, req.placeholders)
        tracer.add("normalize", {"text": text, "placeholders": dict(req.placeholders or {})})
        scores = score_catalog(text, catalog)
        tracer.add(
            "score",
            {
                "scores": [
                    {"answerId": rs.answer.id, "score": rs.score, "phrases": rs.phrase_hits, "keywords": rs.keyword_hits}
                    for rs in scores
                ]
            },
        )

        match = pick_best(scores)
        if match:
            self.store.update_question_status(question_id, "matched", match.answer.id, match.confidence_tier)
            tracer.add("match", {"answerId": match.answer.id, "score": match.confidence_score, "tier": match.confidence_tier})
            self.logger.info(
                "question %s matched answer=%s score=%s tier=%s",
                question_id, match.answer.id, match.confidence_score, match.confidence_tier,
            )
            return QuestionOutcome(envelope=matched_envelope(question_id, match), traces=tracer.traces)

        classification = classify_question(req.question)
        status = status_for(classification)
        self.store.update_question_status(question_id, status)
        tracer.add("classify", {"type": classification.type, "status": status})
        self.logger.info("question %s unmatched type=%s status=%s", question_id, classification.type, status)
        return QuestionOutcome(envelope=fallback_envelope(question_id, classification), traces=tracer.traces)

    # Administrative operations

    def list_answers(self, category: Optional[str] = None) -> list[AnswerRecord]:
        if category:
            return self.store.get_answers_by_category(category)
        return self.store.get_all_answers()

    def get_answer(self, answer_id: str) -> AnswerRecord:
        answer = self.store.get_answer(answer_id)
        if answer is None:
            raise NotFoundError(f"Answer not found: {answer_id}")
        return answer

    def create_answer(self, answer: NewAnswer) -> AnswerRecord:
        rec = self.store.create_answer(answer)
        for problem in validate_catalog([rec]):
            self.logger.warning("answer %s: %s", rec.id, problem)
        self.logger.info("answer %s created title=%r", rec.id, rec.title)
        return rec

    def get_question(self, question_id: str) -> QuestionRecord:
        q = self.store.get_question(question_id)
        if q is None:
            raise NotFoundError(f"Question not found: {question_id}")
        return q

    def questions_for_review(self) -> list[QuestionRecord]:
        return self.store.get_questions_for_review()

    def submit_feedback(self, feedback: NewFeedback) -> FeedbackRecord:
        rec = self.store.store_feedback(feedback)
        self.logger.info("feedback %s sentiment=%s answer=%s", rec.id, rec.sentiment, rec.answer_id)
        return rec

    def list_feedback(self) -> list[FeedbackRecord]:
        return self.store.get_all_feedback()
