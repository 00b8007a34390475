from portfolio_qa.contracts.models import NewAnswer, NewFeedback, QuestionContext, QuestionRequest
from portfolio_qa.errors import NotFoundError

import pytest


def test_scenario_a_matched_high(service):
    out = service.ask(QuestionRequest(question="What's the YTD performance vs S&P 500?"))
    assert out.status == "matched"
    assert out.envelope["confidence"] == "high"
    assert out.envelope["answer"]["id"] == "1"
    q = service.get_question(out.envelope["id"])
    assert q.status == "matched"
    assert q.matched_answer_id == "1"
    assert q.confidence == "high"


def test_scenario_b_personal_no_match(service):
    out = service.ask(QuestionRequest(question="What is my advisor's phone number?"))
    assert out.status == "no_match"
    assert out.envelope["answer"]["data"]["fallbackType"] == "personal"
    assert out.envelope["answer"]["data"]["actionText"] == "View Account Details"
    assert service.get_question(out.envelope["id"]).status == "no_match"


def test_scenario_c_review(service):
    out = service.ask(QuestionRequest(question="Should I sell my Tesla position?"))
    assert out.status == "review"
    assert "answer" not in out.envelope
    assert [q.id for q in service.questions_for_review()] == [out.envelope["id"]]


def test_placeholders_only_affect_scoring(service):
    raw = "What's {benchmark} performance?"
    out = service.ask(QuestionRequest(question=raw, placeholders={"benchmark": "S&P 500"}))
    normalize = next(t for t in out.traces if t["step"] == "normalize")
    assert "s&p 500 performance" in normalize["payload"]["text"]
    assert service.get_question(out.envelope["id"]).question == raw
    assert out.status == "matched"


def test_context_is_logged(service):
    ctx = QuestionContext(accounts=["Growth Portfolio"], timeframe="YTD", selection_mode="accounts")
    out = service.ask(QuestionRequest(question="top holdings", context=ctx))
    assert service.get_question(out.envelope["id"]).context == {
        "accounts": ["Growth Portfolio"],
        "timeframe": "YTD",
        "selectionMode": "accounts",
    }


def test_traces_cover_steps(service):
    out = service.ask(QuestionRequest(question="Should I sell my Tesla position?"))
    assert [t["step"] for t in out.traces] == ["normalize", "score", "classify"]
    scores = out.traces[1]["payload"]["scores"]
    assert len(scores) == 5
    assert all(s["score"] == 0 for s in scores)


def test_inactive_answers_are_not_matched(service, store):
    store.get_answer("1").is_active = False
    out = service.ask(QuestionRequest(question="What's the YTD performance vs S&P 500?"))
    assert out.envelope.get("answer", {}).get("id") != "1"


def test_created_answer_becomes_matchable(service):
    rec = service.create_answer(NewAnswer(title="Cash Position", content="Cash is 3.1%.", keywords=["cash"], phrases=["cash position"]))
    out = service.ask(QuestionRequest(question="What's my cash position?"))
    assert out.envelope["answer"]["id"] == rec.id


def test_unknown_ids_raise(service):
    with pytest.raises(NotFoundError):
        service.get_answer("nope")
    with pytest.raises(NotFoundError):
        service.get_question("nope")


def test_feedback(service):
    rec = service.submit_feedback(NewFeedback(sentiment="up", answer_id="2"))
    assert [f.id for f in service.list_feedback()] == [rec.id]


def test_failure_after_logging_leaves_no_pending_record(service, store, monkeypatch):
    created = []
    original = store.create_question

    def recording_create(question, context=None):
        rec = original(question, context)
        created.append(rec.id)
        return rec

    def broken_classifier(question):
        raise RuntimeError("rule table is broken")

    monkeypatch.setattr(store, "create_question", recording_create)
    monkeypatch.setattr("portfolio_qa.service.classify_question", broken_classifier)

    with pytest.raises(RuntimeError):
        service.ask(QuestionRequest(question="Should I sell my Tesla position?"))
    assert service.get_question(created[0]).status == "no_match"
