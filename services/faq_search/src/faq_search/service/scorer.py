"""Keyword scoring: phrase and per-term substring matches over title and body."""
from collections.abc import Sequence
from dataclasses import dataclass

from faq_search.storage import Document

TITLE_PHRASE_WEIGHT = 20
BODY_PHRASE_WEIGHT = 10
TITLE_TERM_WEIGHT = 5
BODY_TERM_WEIGHT = 2


@dataclass(frozen=True)
class ScoredDocument:
    document: Document
    score: int

    @property
    def id(self) -> str:
        return self.document.id

    @property
    def title(self) -> str:
        return self.document.title

    @property
    def body(self) -> str:
        return self.document.body


def score_document(query_lower: str, query_terms: Sequence[str], document: Document) -> int:
    """Additive score; repeated query terms contribute once per occurrence."""
    title_lower = document.title.lower()
    body_lower = document.body.lower()
    score = 0
    if query_lower in title_lower:
        score += TITLE_PHRASE_WEIGHT
    if query_lower in body_lower:
        score += BODY_PHRASE_WEIGHT
    for term in query_terms:
        if term in title_lower:
            score += TITLE_TERM_WEIGHT
        if term in body_lower:
            score += BODY_TERM_WEIGHT
    return score


def score_and_rank(query: str, corpus: Sequence[Document]) -> list[ScoredDocument]:
    """Score every document; keep score > 0, highest first, ties in corpus order.

    The query is expected to be trimmed and non-empty. Matching is
    case-insensitive plain substring search, no stemming.
    """
    query_lower = query.lower()
    query_terms = query_lower.split()
    scored = [
        ScoredDocument(document=doc, score=score_document(query_lower, query_terms, doc))
        for doc in corpus
    ]
    # sorted() is stable, so equal scores keep corpus order
    return sorted((s for s in scored if s.score > 0), key=lambda s: s.score, reverse=True)


def select_top(ranked: Sequence[ScoredDocument], top_n: int = 3) -> list[ScoredDocument]:
    return list(ranked[:top_n])
