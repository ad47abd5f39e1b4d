"""Plain-text view of a search response: error, no-results or results state."""
from faq_search.service import SearchOutcome

DEFAULT_NO_RESULTS = "No matches found for your query. Please try different keywords."
ELLIPSIS = "..."


def snippet(body: str, max_chars: int = 150) -> str:
    """First max_chars characters of body, with a trailing ellipsis when cut."""
    if len(body) > max_chars:
        return body[:max_chars] + ELLIPSIS
    return body


def render_error(message: str) -> str:
    return f"Error\n{message}"


def render_response(outcome: SearchOutcome, snippet_max_chars: int = 150) -> str:
    if not outcome.results:
        return f"No Results Found\n{outcome.message or DEFAULT_NO_RESULTS}"

    blocks: list[str] = []
    if outcome.summary:
        summary = f"Summary\n{outcome.summary}"
        if outcome.sources:
            summary += "\nSources: " + ", ".join(outcome.sources)
        blocks.append(summary)

    count = len(outcome.results)
    blocks.append(outcome.message or f"Found {count} result{'s' if count != 1 else ''}")
    for doc in outcome.results:
        blocks.append(f"{doc.title}\n{snippet(doc.body, snippet_max_chars)}\nID: {doc.id}")
    return "\n\n".join(blocks)
