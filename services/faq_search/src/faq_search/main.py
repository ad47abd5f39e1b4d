"""FAQ search service entrypoint."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from shared.logging import configure_logging
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse

from faq_search.api import router
from faq_search.api.routes import invalid_query_response
from faq_search.config import FaqSearchSettings
from faq_search.service import SearchService
from faq_search.storage import CorpusError, load_corpus

_settings: FaqSearchSettings | None = None


def get_settings() -> FaqSearchSettings:
    global _settings
    if _settings is None:
        _settings = FaqSearchSettings()
    return _settings


def build_search_service(settings: FaqSearchSettings) -> SearchService:
    return SearchService(
        load_corpus(settings.corpus_path),
        top_n=settings.top_n,
        max_summary_keywords=settings.max_summary_keywords,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: FaqSearchSettings = app.state.settings
    try:
        app.state.search_service = build_search_service(settings)
    except CorpusError as e:
        structlog.get_logger().error(
            "corpus_load_failed",
            path=settings.corpus_path,
            error=str(e),
            msg="Search requests will fail until a valid corpus is configured via FAQ_SEARCH_CORPUS_PATH",
        )
        app.state.search_service = None
    yield
    app.state.search_service = None


def create_app(settings: FaqSearchSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs, level=settings.log_level)
    app = FastAPI(title="FAQ Search Service", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.search_service = None
    app.add_middleware(RequestIdMiddleware)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Unparseable bodies get the same client-side rejection as a blank query
        structlog.get_logger().info("search_request_rejected", errors=len(exc.errors()))
        return invalid_query_response()

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="faq_search")

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        service: SearchService | None = app.state.search_service
        if service is None:
            return HealthResponse(status="unhealthy", service="faq_search", detail="corpus not loaded")
        return HealthResponse(
            status="ok", service="faq_search", detail=f"{service.corpus_size} documents"
        )

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "faq_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
