from faq_search.storage.corpus import (
    DEFAULT_CORPUS_PATH,
    CorpusError,
    Document,
    load_corpus,
    parse_corpus,
)

__all__ = ["DEFAULT_CORPUS_PATH", "CorpusError", "Document", "load_corpus", "parse_corpus"]
