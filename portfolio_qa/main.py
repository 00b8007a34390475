"""portfolio_qa.main

Wiring for settings + logging + storage + question service.

Storage backends:
- memory (default): catalog seeded at start, questions/feedback lost on restart
- sqlite: same interface, durable file under SQLITE_PATH
"""

from __future__ import annotations

from typing import Optional

from portfolio_qa.env_loader import env_file_keys, load_env
from portfolio_qa.config import Settings
from portfolio_qa.logging_utils import build_logger
from portfolio_qa.catalog.loader import load_catalog
from portfolio_qa.contracts.models import QuestionOutcome, QuestionRequest
from portfolio_qa.service import QuestionService
from portfolio_qa.storage.base import AnswerStore
from portfolio_qa.storage.memory import InMemoryStore
from portfolio_qa.storage.sqlite import SqliteStore


def build_store(settings: Settings, logger) -> AnswerStore:
    catalog = load_catalog(settings.catalog_path)
    if settings.storage_backend == "sqlite":
        store: AnswerStore = SqliteStore(settings.sqlite_path, logger=logger)
    else:
        store = InMemoryStore()
    added = store.seed_answers(catalog)
    logger.info("storage=%s seeded %s of %s catalog answers", settings.storage_backend, added, len(catalog))
    return store


def build_service(settings: Optional[Settings] = None) -> QuestionService:
    env_path = None
    if settings is None:
        env_path = load_env()  # load .env if present
        settings = Settings.load()
    logger = build_logger(settings.log_dir, level=settings.log_level)
    if env_path:
        known, other = env_file_keys(env_path)
        logger.info("loaded %s settings=%s", env_path, ",".join(known) or "-")
        if other:
            logger.warning("%s has keys the service does not read: %s", env_path, ",".join(other))
    return QuestionService(build_store(settings, logger), logger)


_service: Optional[QuestionService] = None


def handle_question(req: QuestionRequest) -> QuestionOutcome:
    """In-process entry point used by the Streamlit demo and scripts."""
    global _service
    if _service is None:
        _service = build_service()
    return _service.ask(req)
