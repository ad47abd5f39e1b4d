"""FastAPI routes for the FAQ search service."""
import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from faq_search.api.schemas import ErrorResponse, SearchRequest, SearchResponse
from faq_search.metrics import SEARCH_LATENCY, SEARCH_REQUESTS
from faq_search.service import InvalidQueryError, SearchService

INVALID_QUERY_ERROR = "Query parameter is required and cannot be empty"
INTERNAL_ERROR = "An error occurred while processing your search"

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["search"])


def invalid_query_response() -> JSONResponse:
    SEARCH_REQUESTS.labels(outcome="invalid").inc()
    return JSONResponse(status_code=400, content={"error": INVALID_QUERY_ERROR})


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(body: SearchRequest, request: Request) -> SearchResponse | JSONResponse:
    service: SearchService = request.app.state.search_service
    try:
        with SEARCH_LATENCY.time():
            outcome = service.search(body.query)
    except InvalidQueryError:
        logger.info("search_invalid_query")
        return invalid_query_response()
    except Exception:
        logger.exception("search_failed")
        SEARCH_REQUESTS.labels(outcome="error").inc()
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
    SEARCH_REQUESTS.labels(outcome="matched" if outcome.matched else "no_match").inc()
    return SearchResponse.from_outcome(outcome)
