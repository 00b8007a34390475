"""
FastAPI dependency injection.

Routes depend on `get_question_service`; `create_app(service=...)` overrides it,
which is how tests plug in a fresh in-memory store.
"""
from functools import lru_cache

from portfolio_qa.config import Settings
from portfolio_qa.env_loader import load_env
from portfolio_qa.main import build_service
from portfolio_qa.service import QuestionService


@lru_cache()
def get_settings() -> Settings:
    """Settings singleton (reads .env once)."""
    load_env()
    return Settings.load()


@lru_cache()
def get_question_service() -> QuestionService:
    """Question service singleton built from settings."""
    return build_service(get_settings())
