"""
FastAPI application factory.

Error mapping:
- request validation -> 400 {error, details}
- unknown question/answer id -> 404 {error}
- HTTP errors (405, unknown path) -> their status {error}
- anything else -> 500 {error}, logged with traceback, no internals in the body

Run with:
    uvicorn portfolio_qa.api.app:app --reload
"""
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_qa.api.dependencies import get_question_service, get_settings
from portfolio_qa.api.routes import router
from portfolio_qa.config import Settings
from portfolio_qa.errors import NotFoundError
from portfolio_qa.logging_utils import build_logger
from portfolio_qa.service import QuestionService


def _validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    details = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        details.append({"field": ".".join(loc), "message": err.get("msg", ""), "type": err.get("type", "")})
    return details


def create_app(service: Optional[QuestionService] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = build_logger(settings.log_dir, level=settings.log_level)

    app = FastAPI(
        title="Portfolio Q&A API",
        description="Matches advisor questions to pre-authored portfolio answers",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=settings.api_prefix, tags=["questions"])
    if service is not None:
        app.dependency_overrides[get_question_service] = lambda: service

    @app.get("/health")
    def health_check(svc: QuestionService = Depends(get_question_service)) -> dict[str, Any]:
        return {"status": "healthy", "answers": len(svc.list_answers())}

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = _validation_details(exc)
        logger.info("HTTP 400 %s %s: %s", request.method, request.url.path, details)
        return JSONResponse(status_code=400, content={"error": "Invalid request format", "details": details})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("HTTP 500 %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()
