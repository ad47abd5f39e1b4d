"""Tests for keyword scoring and top-N selection."""
from faq_search.service.scorer import score_and_rank, select_top
from faq_search.storage import Document


def _doc(id: str, title: str = "", body: str = "") -> Document:
    return Document(id=id, title=title, body=body)


def test_scenario_conversion_ranks_only_matching_doc(scenario_corpus) -> None:
    ranked = score_and_rank("conversion", scenario_corpus)
    assert [r.id for r in ranked] == ["a"]
    # 20 title phrase + 10 body phrase + 5 term in title + 2 term in body
    assert ranked[0].score == 37


def test_phrase_and_term_signals_are_additive() -> None:
    corpus = [
        _doc("title-only", title="Trust badges"),
        _doc("body-only", body="add trust badges"),
        _doc("split", title="trust", body="badges"),
    ]
    scores = {r.id: r.score for r in score_and_rank("trust badges", corpus)}
    assert scores["title-only"] == 20 + 5 + 5
    assert scores["body-only"] == 10 + 2 + 2
    assert scores["split"] == 5 + 2


def test_repeated_query_term_counts_each_time() -> None:
    corpus = [_doc("x", title="cta")]
    single = score_and_rank("cta", corpus)[0].score
    double = score_and_rank("cta cta", corpus)[0].score
    assert single == 20 + 5
    # the phrase "cta cta" no longer matches, but the term scores twice
    assert double == 5 + 5


def test_zero_score_documents_are_dropped(scenario_corpus) -> None:
    assert score_and_rank("xyzzy", scenario_corpus) == []


def test_empty_corpus_returns_empty() -> None:
    assert score_and_rank("conversion", []) == []


def test_sorted_descending_and_positive() -> None:
    corpus = [
        _doc("low", body="checkout"),
        _doc("high", title="Checkout form", body="checkout form tips"),
        _doc("none", title="Headline"),
        _doc("mid", title="Checkout"),
    ]
    ranked = score_and_rank("checkout form", corpus)
    scores = [r.score for r in ranked]
    assert all(s > 0 for s in scores)
    assert scores == sorted(scores, reverse=True)
    assert [r.id for r in ranked] == ["high", "mid", "low"]


def test_ties_keep_corpus_order() -> None:
    corpus = [_doc("first", body="pricing"), _doc("second", body="pricing"), _doc("third", body="pricing")]
    assert [r.id for r in score_and_rank("pricing", corpus)] == ["first", "second", "third"]
    reordered = [corpus[2], corpus[0], corpus[1]]
    assert [r.id for r in score_and_rank("pricing", reordered)] == ["third", "first", "second"]


def test_case_insensitive(scenario_corpus) -> None:
    base = score_and_rank("trust badges", scenario_corpus)
    assert score_and_rank("TRUST Badges", scenario_corpus) == base
    assert score_and_rank("Trust BADGES", scenario_corpus) == base


def test_adding_term_occurrence_never_lowers_score() -> None:
    before = _doc("d", title="Landing pages", body="Keep one goal.")
    after = _doc("d", title="Landing pages", body="Keep one goal. Test the headline.")
    query = "landing headline"
    score_before = score_and_rank(query, [before])[0].score
    score_after = score_and_rank(query, [after])[0].score
    assert score_after >= score_before
    assert score_after == score_before + 2


def test_pure_function(scenario_corpus) -> None:
    assert score_and_rank("pricing urgency", scenario_corpus) == score_and_rank(
        "pricing urgency", scenario_corpus
    )


def test_select_top_truncates_and_keeps_order() -> None:
    corpus = [_doc(str(i), body="test") for i in range(5)]
    ranked = score_and_rank("test", corpus)
    assert [r.id for r in select_top(ranked, 3)] == ["0", "1", "2"]
    assert len(select_top(ranked[:2], 3)) == 2
    assert select_top([], 3) == []
