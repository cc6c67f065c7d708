from __future__ import annotations

import pytest

from src.domain.aliases import AliasTable, alias_boost
from src.domain.document import DocKind, Document
from src.domain.scoring import (
    QueryFeatures,
    ScoringWeights,
    jaccard,
    lev_similarity,
    levenshtein,
    overlap_ratio,
    score_document,
)
from src.domain.text_norm import token_set


def test_jaccard_basic_and_empty() -> None:
    assert jaccard({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
    assert jaccard({"a"}, {"a"}) == 1.0
    assert jaccard(set(), set()) == 0.0


@pytest.mark.parametrize(
    "a,b",
    [
        ("I have acne", "does acne go away on its own"),
        ("what causes pimples", "what causes acne"),
        ("", "anything"),
    ],
)
def test_jaccard_is_symmetric(a: str, b: str) -> None:
    assert jaccard(token_set(a), token_set(b)) == jaccard(token_set(b), token_set(a))


def test_levenshtein_classic_cases() -> None:
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "") == 0
    assert levenshtein("flaw", "lawn") == 2


def test_levenshtein_band_is_exact_inside_and_capped_outside() -> None:
    assert levenshtein("kitten", "sitting", max_distance=5) == 3
    assert levenshtein("kitten", "sitting", max_distance=3) == 3
    assert levenshtein("kitten", "sitting", max_distance=1) == 2
    assert levenshtein("a", "abcdef", max_distance=2) == 3


def test_lev_similarity_self_and_empty() -> None:
    assert lev_similarity("what causes acne", "what causes acne") == 1.0
    assert lev_similarity("", "") == 1.0
    assert lev_similarity("abc", "") == 0.0


def test_overlap_ratio_counts_repeated_doc_tokens() -> None:
    assert overlap_ratio(["acne", "help"], ["acne"]) == 0.5
    # unclamped here; the scorer clamps it to 1
    assert overlap_ratio(["acne", "help"], ["acne", "acne", "acne"]) == 1.5
    assert overlap_ratio([], ["acne"]) == 0.0


def test_alias_boost_matches_synonyms_on_whole_words() -> None:
    assert alias_boost("what causes acne", "what causes pimples") == pytest.approx(0.08)
    assert alias_boost("spotsy skin", "pimples") == 0.0
    assert alias_boost("what causes acne", "how tall am I") == 0.0


def test_alias_boost_arabic_group() -> None:
    assert alias_boost("حب الشباب", "بثور في الوجه") == pytest.approx(0.08)


def test_alias_boost_is_capped() -> None:
    table = AliasTable(groups={"a1": ("b1",), "c1": ("d1",), "e1": ("f1",)})
    assert alias_boost("a1 c1 e1", "b1 d1 f1", table) == pytest.approx(0.2)


@pytest.mark.parametrize(
    "query,candidate",
    [
        ("acne pimples zits spots period menses penis vagina", "pimples period male organ"),
        ("", ""),
        ("masturbation", "self-pleasure and solo sex"),
        ("العادة السرية", "الاستمناء"),
    ],
)
def test_alias_boost_bounds(query: str, candidate: str) -> None:
    assert 0.0 <= alias_boost(query, candidate) <= 0.2


def test_score_document_exact_pattern() -> None:
    doc = Document("what causes pimples", "acne", DocKind.PATTERN, "Pimples are caused...")
    s = score_document("What causes pimples?", doc)
    assert s.jaccard == 1.0
    assert s.levenshtein == 1.0
    assert s.overlap == 1.0
    assert s.alias == pytest.approx(0.08)
    assert s.kind_bias == pytest.approx(0.02)
    assert s.total == pytest.approx(0.5 + 0.32 + 0.14 + 0.08 + 0.02)


def test_kind_bias_orders_identical_texts() -> None:
    q = QueryFeatures.of("clogged pores")
    scores = {
        kind: score_document(q, Document("clogged pores", "acne", kind)).total
        for kind in DocKind
    }
    assert scores[DocKind.RESPONSE] == pytest.approx(scores[DocKind.TAG] + 0.04)
    assert scores[DocKind.PATTERN] == pytest.approx(scores[DocKind.TAG] + 0.02)


def test_score_document_clamps_overlap_and_accepts_custom_weights() -> None:
    doc = Document("help help help", "misc", DocKind.TAG)
    weights = ScoringWeights(jaccard=0, levenshtein=0, overlap=1)
    s = score_document("help me", doc, weights=weights)
    assert s.overlap == 1.0
    assert s.total == pytest.approx(1.0)
