"""API request/response schemas."""
from typing import Any

from pydantic import BaseModel

from faq_search.service import SearchOutcome


class SearchRequest(BaseModel):
    # Validated by the service so that a missing, non-string or blank
    # query maps to the same 400 response.
    query: Any = None


class DocumentItem(BaseModel):
    id: str
    title: str
    body: str


class SearchResponse(BaseModel):
    results: list[DocumentItem]
    summary: str | None = None
    sources: list[str]
    message: str

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        return cls(
            results=[DocumentItem(**doc.as_dict()) for doc in outcome.results],
            summary=outcome.summary,
            sources=list(outcome.sources),
            message=outcome.message,
        )


class ErrorResponse(BaseModel):
    error: str
