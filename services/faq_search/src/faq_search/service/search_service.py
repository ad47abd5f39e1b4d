"""Search pipeline: validate query -> score -> select top N -> summarize."""
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from faq_search.service.scorer import score_and_rank, select_top
from faq_search.service.summarizer import summarize
from faq_search.storage import Document

logger = structlog.get_logger()

NO_MATCHES_MESSAGE = "No matches found for your query. Try different keywords."


class InvalidQueryError(ValueError):
    """Query is absent, not a string, or blank after trimming."""


@dataclass
class SearchOutcome:
    """Internal result of SearchService.search(); maps to SearchResponse."""

    results: list[Document] = field(default_factory=list)
    summary: str | None = None
    sources: list[str] = field(default_factory=list)
    message: str = NO_MATCHES_MESSAGE

    @property
    def matched(self) -> bool:
        return bool(self.results)


def validate_query(query: object) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidQueryError("Query parameter is required and cannot be empty")
    return query.strip()


def found_message(count: int) -> str:
    return f"Found {count} match{'es' if count != 1 else ''}"


class SearchService:
    def __init__(
        self,
        corpus: Sequence[Document],
        top_n: int = 3,
        max_summary_keywords: int = 3,
    ) -> None:
        self._corpus = tuple(corpus)
        self._top_n = top_n
        self._max_summary_keywords = max_summary_keywords

    @property
    def corpus_size(self) -> int:
        return len(self._corpus)

    def search(self, query: object) -> SearchOutcome:
        """Run the pipeline. Raises InvalidQueryError before any scoring happens."""
        text = validate_query(query)
        ranked = score_and_rank(text, self._corpus)
        top = select_top(ranked, self._top_n)
        logger.info(
            "search_completed",
            query_len=len(text),
            matched=len(ranked),
            returned=len(top),
        )
        if not top:
            return SearchOutcome()
        return SearchOutcome(
            results=[s.document for s in top],
            summary=summarize(top, text, max_keywords=self._max_summary_keywords),
            sources=[s.id for s in top],
            message=found_message(len(top)),
        )
