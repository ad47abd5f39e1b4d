"""Shared fixtures: small corpora and a corpus file on disk."""
import json
from pathlib import Path

import pytest

from faq_search.storage import Document

SCENARIO_CORPUS = (
    Document(
        id="a",
        title="Conversion Rate Basics",
        body="Improve your conversion funnel. Add trust badges near the CTA.",
    ),
    Document(id="b", title="Pricing Page Tips", body="Use urgency and clear pricing."),
)


@pytest.fixture
def scenario_corpus() -> tuple[Document, ...]:
    return SCENARIO_CORPUS


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "faqs.json"
    path.write_text(json.dumps([d.as_dict() for d in SCENARIO_CORPUS]), encoding="utf-8")
    return path
