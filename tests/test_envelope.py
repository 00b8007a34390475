from portfolio_qa.contracts.models import AnswerRecord, MatchResult
from portfolio_qa.matching.classifier import classify_question
from portfolio_qa.matching.envelope import fallback_envelope, matched_envelope


def test_matched_envelope():
    answer = AnswerRecord(id="9", title="T", content="C", category="Cat", answer_type="risk", data={"x": 1})
    env = matched_envelope("q1", MatchResult(answer=answer, confidence_score=9, confidence_tier="high"))
    assert env == {
        "id": "q1",
        "status": "matched",
        "answer": {"id": "9", "title": "T", "content": "C", "category": "Cat", "answerType": "risk", "data": {"x": 1}},
        "confidence": "high",
        "message": "Found high confidence match",
    }


def test_review_envelope_omits_answer():
    env = fallback_envelope("q2", classify_question("Should I sell my Tesla position?"))
    assert env["status"] == "review"
    assert "answer" not in env
    assert "confidence" not in env
    assert "review queue" in env["message"]


def test_no_match_envelope_has_fallback_answer():
    env = fallback_envelope("q3", classify_question("Interest rates outlook"))
    assert env["status"] == "no_match"
    answer = env["answer"]
    assert answer["id"] == "fallback-market"
    assert answer["category"] == "Fallback"
    assert answer["content"] == env["message"]
    assert answer["data"] == {"fallbackType": "market", "actionText": "Open Market Data", "isUnmatched": True}
