"""Prometheus metrics for the search endpoint."""
from prometheus_client import Counter, Histogram

SEARCH_REQUESTS = Counter(
    "faq_search_requests_total",
    "Search requests by outcome",
    ["outcome"],  # matched | no_match | invalid | error
)
SEARCH_LATENCY = Histogram(
    "faq_search_latency_seconds",
    "Time spent scoring and summarizing a query",
)
