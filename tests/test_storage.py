import pytest

from portfolio_qa.catalog.default_catalog import default_catalog
from portfolio_qa.contracts.models import NewAnswer, NewFeedback
from portfolio_qa.storage.memory import InMemoryStore
from portfolio_qa.storage.sqlite import SqliteStore


@pytest.fixture(params=["memory", "sqlite", "sqlite-in-memory"])
def seeded(request, tmp_path):
    if request.param == "memory":
        s = InMemoryStore()
    elif request.param == "sqlite-in-memory":
        s = SqliteStore(":memory:")
    else:
        s = SqliteStore(str(tmp_path / "store.db"))
    s.seed_answers(default_catalog())
    return s


def test_seed_keeps_ids_and_order(seeded):
    assert [a.id for a in seeded.get_all_answers()] == ["1", "2", "3", "4", "5"]


def test_seed_is_idempotent(seeded):
    assert seeded.seed_answers(default_catalog()) == 0
    assert len(seeded.get_all_answers()) == 5


def test_answer_payload_round_trip(seeded):
    a = seeded.get_answer("3")
    assert a.keywords[0] == "holdings"
    assert a.phrases == ["top holdings", "largest positions"]
    assert a.data["topHoldings"][0]["symbol"] == "AAPL"
    assert a.is_active


def test_create_answer_appends(seeded):
    rec = seeded.create_answer(NewAnswer(title="Cash", content="Cash is 3%", keywords=["cash"]))
    assert rec.id not in {"1", "2", "3", "4", "5"}
    assert seeded.get_all_answers()[-1].id == rec.id
    assert seeded.get_answer(rec.id).title == "Cash"


def test_answers_by_category_case_insensitive(seeded):
    assert [a.id for a in seeded.get_answers_by_category("risk assessment")] == ["2"]
    assert seeded.get_answers_by_category("nope") == []


def test_question_lifecycle(seeded):
    q = seeded.create_question("Top holdings?", {"accounts": ["A"], "timeframe": "YTD", "selectionMode": "accounts"})
    assert q.status == "pending"
    updated = seeded.update_question_status(q.id, "matched", "3", "high")
    assert updated.status == "matched"
    assert updated.matched_answer_id == "3"
    assert updated.confidence == "high"
    got = seeded.get_question(q.id)
    assert got.question == "Top holdings?"
    assert got.context["accounts"] == ["A"]


def test_update_unknown_question_returns_none(seeded):
    assert seeded.update_question_status("missing", "review") is None
    assert seeded.get_question("missing") is None


def test_questions_for_review(seeded):
    a = seeded.create_question("Should I sell?")
    b = seeded.create_question("Phone?")
    seeded.update_question_status(a.id, "review")
    seeded.update_question_status(b.id, "no_match")
    assert [q.id for q in seeded.get_questions_for_review()] == [a.id]


def test_feedback_round_trip(seeded):
    rec = seeded.store_feedback(NewFeedback(sentiment="down", answer_id="1", reasons=["incorrect_data"]))
    assert rec.id
    assert rec.created_at is not None
    stored = seeded.get_all_feedback()
    assert [f.id for f in stored] == [rec.id]
    assert stored[0].reasons == ["incorrect_data"]
    assert stored[0].answer_id == "1"


def test_sqlite_survives_reopen(tmp_path):
    path = str(tmp_path / "durable.db")
    first = SqliteStore(path)
    first.seed_answers(default_catalog())
    q = first.create_question("Should I sell?")
    first.update_question_status(q.id, "review")

    second = SqliteStore(path)
    assert len(second.get_all_answers()) == 5
    assert [r.id for r in second.get_questions_for_review()] == [q.id]


def test_sqlite_in_memory_keeps_one_database():
    store = SqliteStore(":memory:")
    assert store.seed_answers(default_catalog()) == 5
    q = store.create_question("Should I sell my Tesla position?")
    store.update_question_status(q.id, "review")
    assert [r.id for r in store.get_questions_for_review()] == [q.id]
    assert len(store.get_all_answers()) == 5
    store.close()


def test_created_ids_are_uuid4_hex(seeded):
    rec = seeded.create_answer(NewAnswer(title="Cash", content="c", keywords=["cash"]))
    assert len(rec.id) == 32
    int(rec.id, 16)
