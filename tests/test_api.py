from fastapi.testclient import TestClient

from portfolio_qa.api.app import create_app


class ExplodingService:
    def __init__(self):
        self.calls = 0

    def ask(self, req):
        self.calls += 1
        raise RuntimeError("catalog entry is broken")


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "answers": 5}


def test_scenario_a(client):
    resp = client.post("/api/questions", json={"question": "What's the YTD performance vs S&P 500?"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "matched"
    assert body["confidence"] == "high"
    assert body["answer"]["title"] == "Portfolio Performance Analysis"
    assert body["answer"]["answerType"] == "performance"
    assert body["message"] == "Found high confidence match"


def test_scenario_b(client):
    resp = client.post("/api/questions", json={"question": "What is my advisor's phone number?"})
    body = resp.json()
    assert body["status"] == "no_match"
    assert "confidence" not in body
    assert body["answer"]["data"]["fallbackType"] == "personal"
    assert body["answer"]["data"]["isUnmatched"] is True
    assert body["answer"]["data"]["actionText"] == "View Account Details"


def test_scenario_c_and_review_queue(client):
    resp = client.post("/api/questions", json={"question": "Should I sell my Tesla position?"})
    body = resp.json()
    assert body["status"] == "review"
    assert "answer" not in body

    queue = client.get("/api/questions/review").json()
    assert [q["id"] for q in queue] == [body["id"]]
    assert queue[0]["question"] == "Should I sell my Tesla position?"
    assert queue[0]["status"] == "review"


def test_question_with_context_and_placeholders(client):
    resp = client.post(
        "/api/questions",
        json={
            "question": "What's {benchmark} performance?",
            "context": {"accounts": ["Growth Portfolio"], "timeframe": "YTD", "selectionMode": "group"},
            "placeholders": {"benchmark": "S&P 500"},
        },
    )
    body = resp.json()
    assert body["status"] == "matched"
    stored = client.get(f"/api/questions/{body['id']}").json()
    assert stored["question"] == "What's {benchmark} performance?"
    assert stored["context"]["selectionMode"] == "group"
    assert stored["matchedAnswerId"] == "1"


def test_empty_question_rejected_before_matching(settings):
    svc = ExplodingService()
    client = TestClient(create_app(service=svc, settings=settings))
    resp = client.post("/api/questions", json={"question": ""})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid request format"
    assert body["details"][0]["field"] == "question"
    assert svc.calls == 0


def test_missing_question_rejected(client):
    resp = client.post("/api/questions", json={"placeholders": {}})
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "question"


def test_bad_selection_mode_rejected(client):
    resp = client.post("/api/questions", json={"question": "top holdings", "context": {"selectionMode": "household"}})
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "context.selectionMode"


def test_non_string_placeholder_rejected(client):
    resp = client.post("/api/questions", json={"question": "x", "placeholders": {"benchmark": 5}})
    assert resp.status_code == 400


def test_method_not_allowed(client):
    resp = client.get("/api/questions")
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}
    assert client.delete("/api/answers").status_code == 405


def test_unknown_path_is_404(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_internal_error_is_500_without_details(settings):
    client = TestClient(create_app(service=ExplodingService(), settings=settings), raise_server_exceptions=False)
    resp = client.post("/api/questions", json={"question": "top holdings"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_feedback_round_trip(client):
    asked = client.post("/api/questions", json={"question": "What's the YTD performance vs S&P 500?"}).json()
    answer_id = asked["answer"]["id"]

    resp = client.post("/api/feedback", json={"answerId": answer_id, "sentiment": "down", "reasons": ["incorrect_data"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Feedback submitted successfully"

    listed = client.get("/api/feedback").json()
    assert len(listed) == 1
    assert listed[0]["id"] == body["feedbackId"]
    assert listed[0]["answerId"] == answer_id
    assert listed[0]["reasons"] == ["incorrect_data"]
    assert listed[0]["createdAt"]


def test_feedback_validation(client):
    assert client.post("/api/feedback", json={"sentiment": "meh"}).status_code == 400
    assert client.post("/api/feedback", json={"sentiment": "up", "reasons": ["bogus"]}).status_code == 400
    assert client.post("/api/feedback", json={"sentiment": "up", "comment": "x" * 1001}).status_code == 400


def test_list_answers(client):
    answers = client.get("/api/answers").json()
    assert [a["id"] for a in answers] == ["1", "2", "3", "4", "5"]
    assert answers[0]["phrases"] == ["YTD performance", "portfolio return", "vs S&P 500"]
    risk = client.get("/api/answers", params={"category": "Risk Assessment"}).json()
    assert [a["id"] for a in risk] == ["2"]


def test_create_answer_then_match(client):
    resp = client.post(
        "/api/answers",
        json={
            "title": "Cash Position",
            "content": "Cash is 3.1% of assets.",
            "category": "Liquidity",
            "answerType": "cash",
            "keywords": ["cash"],
            "phrases": ["cash position"],
        },
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["answerType"] == "cash"
    assert client.get(f"/api/answers/{created['id']}").json()["title"] == "Cash Position"

    matched = client.post("/api/questions", json={"question": "What's my cash position?"}).json()
    assert matched["answer"]["id"] == created["id"]


def test_create_answer_validation(client):
    resp = client.post("/api/answers", json={"title": "", "content": "x"})
    assert resp.status_code == 400


def test_unknown_ids_are_404(client):
    resp = client.get("/api/answers/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Answer not found: nope"}
    assert client.get("/api/questions/nope").status_code == 404
