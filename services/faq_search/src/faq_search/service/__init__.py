from faq_search.service.scorer import ScoredDocument, score_and_rank, select_top
from faq_search.service.search_service import (
    NO_MATCHES_MESSAGE,
    InvalidQueryError,
    SearchOutcome,
    SearchService,
    validate_query,
)
from faq_search.service.summarizer import summarize

__all__ = [
    "NO_MATCHES_MESSAGE",
    "InvalidQueryError",
    "ScoredDocument",
    "SearchOutcome",
    "SearchService",
    "score_and_rank",
    "select_top",
    "summarize",
    "validate_query",
]
