"""portfolio_qa.storage.sqlite

SQLite store (durable backend, STORAGE_BACKEND=sqlite).

One short-lived connection per call, except for SQLITE_PATH=":memory:", which keeps a single
shared connection (a fresh in-memory connection would be an empty database).
List-valued and payload columns are stored as JSON text.
The `seq` column preserves catalog order for the matcher's tie-break.
"""

from __future__ import annotations

import json
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, Optional

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
from portfolio_qa.errors import StorageError
from portfolio_qa.storage.base import AnswerStore
from portfolio_qa.storage.memory import new_id

_SCHEMA = """
CREATE TABLE IF NOT EXISTS answers (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    category TEXT,
    keywords TEXT NOT NULL DEFAULT '[]',
    phrases TEXT NOT NULL DEFAULT '[]',
    answer_type TEXT,
    data TEXT,
    is_active INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS questions (
    id TEXT PRIMARY KEY,
    question TEXT NOT NULL,
    context TEXT,
    status TEXT NOT NULL DEFAULT 'pending',
    matched_answer_id TEXT,
    confidence TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_questions_status ON questions(status);
CREATE TABLE IF NOT EXISTS feedback (
    id TEXT PRIMARY KEY,
    answer_id TEXT,
    question_id TEXT,
    question TEXT,
    sentiment TEXT NOT NULL,
    reasons TEXT NOT NULL DEFAULT '[]',
    comment TEXT,
    created_at TEXT NOT NULL
);
"""


def _dumps(v: Any) -> Optional[str]:
    return None if v is None else json.dumps(v, ensure_ascii=False)


def _loads(v: Optional[str]) -> Any:
    return None if v is None else json.loads(v)


def _ts(v: str) -> datetime:
    return datetime.fromisoformat(v)


class SqliteStore(AnswerStore):
    def __init__(self, sqlite_path: str, logger=None, timeout_seconds: int = 10):
        self.sqlite_path = sqlite_path
        self.logger = logger
        self.timeout_seconds = timeout_seconds
        self._write_lock = threading.Lock()
        self._shared_lock = threading.RLock()
        self._shared: Optional[sqlite3.Connection] = None
        if sqlite_path == ":memory:":
            self._shared = sqlite3.connect(sqlite_path, timeout=timeout_seconds, check_same_thread=False)
            self._shared.row_factory = sqlite3.Row
        else:
            Path(sqlite_path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(_SCHEMA)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        if self._shared is not None:
            # one connection for every thread; calls take turns
            with self._shared_lock:
                yield from self._transaction(self._shared)
            return
        try:
            conn = sqlite3.connect(self.sqlite_path, timeout=self.timeout_seconds)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open SQLite database {self.sqlite_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield from self._transaction(conn)
        finally:
            conn.close()

    def _transaction(self, conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            if self.logger:
                self.logger.error("sqlite error: %s", e)
            raise StorageError(str(e)) from e

    def close(self) -> None:
        """Release the shared in-memory connection; file-backed stores hold none."""
        if self._shared is not None:
            self._shared.close()
            self._shared = None

    # Answers

    def _row_to_answer(self, r: sqlite3.Row) -> AnswerRecord:
        return AnswerRecord(
            id=r["id"],
            title=r["title"],
            content=r["content"],
            category=r["category"],
            keywords=_loads(r["keywords"]) or [],
            phrases=_loads(r["phrases"]) or [],
            answer_type=r["answer_type"],
            data=_loads(r["data"]),
            is_active=bool(r["is_active"]),
            created_at=_ts(r["created_at"]),
        )

    def _insert_answer(self, conn: sqlite3.Connection, a: AnswerRecord) -> None:
        conn.execute(
            "INSERT INTO answers (id, title, content, category, keywords, phrases, answer_type, data, is_active, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                a.id, a.title, a.content, a.category,
                _dumps(list(a.keywords)), _dumps(list(a.phrases)),
                a.answer_type, _dumps(a.data), int(a.is_active), a.created_at.isoformat(),
            ),
        )

    def get_all_answers(self) -> list[AnswerRecord]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM answers ORDER BY seq").fetchall()
        return [self._row_to_answer(r) for r in rows]

    def get_answer(self, answer_id: str) -> Optional[AnswerRecord]:
        with self._connect() as conn:
            r = conn.execute("SELECT * FROM answers WHERE id = ?", (answer_id,)).fetchone()
        return self._row_to_answer(r) if r else None

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
        with self._write_lock, self._connect() as conn:
            self._insert_answer(conn, rec)
        return rec

    def seed_answers(self, answers: list[AnswerRecord]) -> int:
        added = 0
        with self._write_lock, self._connect() as conn:
            existing = {r["id"] for r in conn.execute("SELECT id FROM answers").fetchall()}
            for a in answers:
                if a.id in existing:
                    continue
                self._insert_answer(conn, a)
                existing.add(a.id)
                added += 1
        return added

    # Questions

    def _row_to_question(self, r: sqlite3.Row) -> QuestionRecord:
        return QuestionRecord(
            id=r["id"],
            question=r["question"],
            context=_loads(r["context"]),
            status=r["status"],
            matched_answer_id=r["matched_answer_id"],
            confidence=r["confidence"],
            created_at=_ts(r["created_at"]),
            updated_at=_ts(r["updated_at"]),
        )

    def create_question(self, question: str, context: Optional[dict[str, Any]] = None) -> QuestionRecord:
        rec = QuestionRecord(id=new_id(), question=question, context=context)
        with self._write_lock, self._connect() as conn:
            conn.execute(
                "INSERT INTO questions (id, question, context, status, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?)",
                (rec.id, rec.question, _dumps(rec.context), rec.status, rec.created_at.isoformat(), rec.updated_at.isoformat()),
            )
        return rec

    def get_question(self, question_id: str) -> Optional[QuestionRecord]:
        with self._connect() as conn:
            r = conn.execute("SELECT * FROM questions WHERE id = ?", (question_id,)).fetchone()
        return self._row_to_question(r) if r else None

    def update_question_status(
        self,
        question_id: str,
        status: QuestionStatus,
        matched_answer_id: Optional[str] = None,
        confidence: Optional[ConfidenceTier] = None,
    ) -> Optional[QuestionRecord]:
        with self._write_lock, self._connect() as conn:
            cur = conn.execute(
                "UPDATE questions SET status = ?, "
                "matched_answer_id = COALESCE(?, matched_answer_id), "
                "confidence = COALESCE(?, confidence), updated_at = ? WHERE id = ?",
                (status, matched_answer_id, confidence, utcnow().isoformat(), question_id),
            )
            if cur.rowcount == 0:
                return None
        return self.get_question(question_id)

    def get_questions_for_review(self) -> list[QuestionRecord]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM questions WHERE status = 'review' ORDER BY created_at"
            ).fetchall()
        return [self._row_to_question(r) for r in rows]

    # Feedback

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
        with self._write_lock, self._connect() as conn:
            conn.execute(
                "INSERT INTO feedback (id, answer_id, question_id, question, sentiment, reasons, comment, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    rec.id, rec.answer_id, rec.question_id, rec.question, rec.sentiment,
                    _dumps(rec.reasons), rec.comment, rec.created_at.isoformat(),
                ),
            )
        return rec

    def get_all_feedback(self) -> list[FeedbackRecord]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM feedback ORDER BY created_at").fetchall()
        return [
            FeedbackRecord(
                id=r["id"],
                sentiment=r["sentiment"],
                answer_id=r["answer_id"],
                question_id=r["question_id"],
                question=r["question"],
                reasons=_loads(r["reasons"]) or [],
                comment=r["comment"],
                created_at=_ts(r["created_at"]),
            )
            for r in rows
        ]
