"""Template summary of the top matches: count, topic keywords, lead sentence."""
from collections.abc import Sequence

from faq_search.service.scorer import ScoredDocument

# Fixed vocabulary; matched keywords are reported in this order, not by frequency.
TOPIC_KEYWORDS = (
    "conversion",
    "trust",
    "form",
    "badge",
    "cta",
    "button",
    "headline",
    "testimonial",
    "urgency",
    "pricing",
    "checkout",
    "funnel",
    "landing",
    "optimization",
    "test",
    "experiment",
)

MAX_LEAD_SENTENCE_CHARS = 120


def find_topic_keywords(documents: Sequence[ScoredDocument]) -> list[str]:
    """Vocabulary keywords occurring as substrings of the combined lowercased text."""
    text = " ".join(f"{d.title} {d.body}" for d in documents).lower()
    return [kw for kw in TOPIC_KEYWORDS if kw in text]


def lead_sentence(body: str) -> str | None:
    """Body text before the first period, if non-empty and short enough to quote."""
    first = body.split(".", 1)[0]
    if first and len(first) < MAX_LEAD_SENTENCE_CHARS:
        return first
    return None


def summarize(
    top_documents: Sequence[ScoredDocument], query: str, max_keywords: int = 3
) -> str:
    """Build the summary for a non-empty, best-first list of matches."""
    count = len(top_documents)
    summary = (
        f'Your search for "{query}" returned {count} relevant '
        f"result{'s' if count > 1 else ''}."
    )
    keywords = find_topic_keywords(top_documents)[:max_keywords]
    if keywords:
        summary += f" The results focus on {', '.join(keywords)} strategies."
    lead = lead_sentence(top_documents[0].body)
    if lead:
        summary += f" Top result: {lead}."
    return summary
