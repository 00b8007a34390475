"""
Question, answer and feedback endpoints.

Only HTTP concerns live here; matching, classification and persistence are delegated
to QuestionService.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends

from portfolio_qa.api.dependencies import get_question_service
from portfolio_qa.api.schemas import AnswerBody, FeedbackBody, QuestionBody
from portfolio_qa.service import QuestionService

router = APIRouter()


@router.post("/questions")
def ask_question(
    body: QuestionBody,
    service: QuestionService = Depends(get_question_service),
) -> dict[str, Any]:
    """Match a question against the catalog and return the response envelope."""
    outcome = service.ask(body.to_request())
    return outcome.envelope


@router.get("/questions/review")
def list_review_questions(service: QuestionService = Depends(get_question_service)) -> list[dict[str, Any]]:
    """Questions waiting in the advisor review queue."""
    return [q.to_dict() for q in service.questions_for_review()]


@router.get("/questions/{question_id}")
def get_question(question_id: str, service: QuestionService = Depends(get_question_service)) -> dict[str, Any]:
    return service.get_question(question_id).to_dict()


@router.get("/answers")
def list_answers(
    category: Optional[str] = None,
    service: QuestionService = Depends(get_question_service),
) -> list[dict[str, Any]]:
    return [a.to_dict() for a in service.list_answers(category)]


@router.post("/answers", status_code=201)
def create_answer(body: AnswerBody, service: QuestionService = Depends(get_question_service)) -> dict[str, Any]:
    return service.create_answer(body.to_new_answer()).to_dict()


@router.get("/answers/{answer_id}")
def get_answer(answer_id: str, service: QuestionService = Depends(get_question_service)) -> dict[str, Any]:
    return service.get_answer(answer_id).to_dict()


@router.post("/feedback")
def submit_feedback(body: FeedbackBody, service: QuestionService = Depends(get_question_service)) -> dict[str, Any]:
    rec = service.submit_feedback(body.to_new_feedback())
    return {"success": True, "feedbackId": rec.id, "message": "Feedback submitted successfully"}


@router.get("/feedback")
def list_feedback(service: QuestionService = Depends(get_question_service)) -> list[dict[str, Any]]:
    return [f.to_dict() for f in service.list_feedback()]
