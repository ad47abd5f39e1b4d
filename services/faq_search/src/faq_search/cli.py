"""Search CLI - run one query against the configured corpus and print the result."""
import sys

from shared.logging import configure_logging

from faq_search.config import FaqSearchSettings
from faq_search.render import render_error, render_response
from faq_search.service import SearchService
from faq_search.storage import CorpusError, load_corpus

EMPTY_QUERY_MESSAGE = "Please enter a search query"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    query = " ".join(args)
    if not query.strip():
        print(render_error(EMPTY_QUERY_MESSAGE), file=sys.stderr)
        return 2

    settings = FaqSearchSettings()
    # Keep stdout for the rendered result
    configure_logging(json_logs=settings.json_logs, level="WARNING")
    try:
        corpus = load_corpus(settings.corpus_path)
    except CorpusError as e:
        print(render_error(str(e)), file=sys.stderr)
        return 1

    service = SearchService(
        corpus,
        top_n=settings.top_n,
        max_summary_keywords=settings.max_summary_keywords,
    )
    outcome = service.search(query)
    print(render_response(outcome, snippet_max_chars=settings.snippet_max_chars))
    return 0


if __name__ == "__main__":
    sys.exit(main())
