"""
Pydantic v2 request schemas for the HTTP layer.

Field names are camelCase on the wire; the `to_*` helpers convert to the internal dataclasses.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_qa.contracts.models import NewAnswer, NewFeedback, QuestionContext, QuestionRequest

FeedbackReason = Literal[
    "incorrect_data",
    "outdated",
    "not_relevant",
    "unclear",
    "missing_info",
    "wrong_timeframe",
    "wrong_accounts",
    "other",
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContextBody(CamelModel):
    """Account selection the question is asked against."""
    accounts: Optional[list[str]] = None
    timeframe: Optional[str] = None
    selection_mode: Optional[Literal["accounts", "group"]] = None


class QuestionBody(CamelModel):
    """Schema for POST /questions."""
    question: str = Field(..., min_length=1, description="Raw question text")
    context: Optional[ContextBody] = None
    placeholders: Optional[dict[str, str]] = Field(None, description="{name} -> replacement, scoring only")

    def to_request(self) -> QuestionRequest:
        ctx = None
        if self.context is not None:
            ctx = QuestionContext(
                accounts=list(self.context.accounts or []),
                timeframe=self.context.timeframe,
                selection_mode=self.context.selection_mode,
            )
        return QuestionRequest(question=self.question, context=ctx, placeholders=self.placeholders)


class AnswerBody(CamelModel):
    """Schema for POST /answers."""
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    category: Optional[str] = None
    answer_type: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)
    phrases: list[str] = Field(default_factory=list)
    data: Any = None

    def to_new_answer(self) -> NewAnswer:
        return NewAnswer(
            title=self.title,
            content=self.content,
            category=self.category,
            keywords=list(self.keywords),
            phrases=list(self.phrases),
            answer_type=self.answer_type,
            data=self.data,
        )


class FeedbackBody(CamelModel):
    """Schema for POST /feedback."""
    answer_id: Optional[str] = None
    question_id: Optional[str] = None
    question: Optional[str] = Field(None, min_length=1)
    sentiment: Literal["up", "down"]
    reasons: Optional[list[FeedbackReason]] = None
    comment: Optional[str] = Field(None, max_length=1000)

    def to_new_feedback(self) -> NewFeedback:
        return NewFeedback(
            sentiment=self.sentiment,
            answer_id=self.answer_id,
            question_id=self.question_id,
            question=self.question,
            reasons=list(self.reasons or []),
            comment=self.comment,
        )
