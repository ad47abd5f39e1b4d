"""In-memory FAQ corpus: immutable documents loaded once from a JSON file."""
import json
from dataclasses import dataclass
from pathlib import Path

import structlog

logger = structlog.get_logger()

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "faqs.json"

_REQUIRED_FIELDS = ("id", "title", "body")


class CorpusError(ValueError):
    """Raised when the corpus file is missing, unparseable or has malformed entries."""


@dataclass(frozen=True)
class Document:
    id: str
    title: str
    body: str

    def as_dict(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title, "body": self.body}


def parse_corpus(entries: object) -> tuple[Document, ...]:
    """Validate raw JSON entries and build the read-only document table."""
    if not isinstance(entries, list):
        raise CorpusError("Corpus must be a JSON array of {id, title, body} objects")
    documents: list[Document] = []
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CorpusError(f"Corpus entry {i} is not an object")
        for field in _REQUIRED_FIELDS:
            if not isinstance(entry.get(field), str):
                raise CorpusError(f"Corpus entry {i} has missing or non-string '{field}'")
        if entry["id"] in seen:
            raise CorpusError(f"Duplicate document id: {entry['id']}")
        seen.add(entry["id"])
        documents.append(Document(id=entry["id"], title=entry["title"], body=entry["body"]))
    return tuple(documents)


def load_corpus(path: str | Path = DEFAULT_CORPUS_PATH) -> tuple[Document, ...]:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CorpusError(f"Corpus file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CorpusError(f"Corpus file is not valid JSON: {path}: {e}") from e
    documents = parse_corpus(raw)
    logger.info("corpus_loaded", path=str(path), count=len(documents))
    return documents
