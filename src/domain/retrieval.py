from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from src.domain.aliases import DEFAULT_ALIASES, AliasTable
from src.domain.document import DocKind, Document
from src.domain.indexing import Corpus
from src.domain.knowledge import KnowledgeBase
from src.domain.scoring import (
    DEFAULT_WEIGHTS,
    KIND_BIAS,
    QueryFeatures,
    ScoringWeights,
    score_document,
)


@dataclass(frozen=True)
class Match:
    tag: str
    pattern: str  # raw text of the matched document (pattern, response sentence or tag term)
    response: str  # full response to answer with
    score: float


NO_MATCH = Match(tag="", pattern="", response="", score=0.0)


@dataclass(frozen=True)
class RetrievalResult:
    top: tuple[Match, ...]
    best: Match
    global_relatedness: float


# (corpus position, match); the position is the tie-break key across partitions
Scored = tuple[int, Match]


def global_relatedness(query_tokens: Iterable[str], vocabulary: frozenset[str]) -> float:
    """Share of the query's distinct tokens that occur anywhere in the corpus vocabulary."""
    qset = set(query_tokens)
    hits = sum(1 for t in qset if t in vocabulary)
    return min(1.0, hits / max(1, len(qset)))


def score_corpus(
    query: QueryFeatures | str,
    documents: Sequence[Document],
    *,
    offset: int = 0,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    kind_bias: Mapping[DocKind, float] = KIND_BIAS,
    aliases: AliasTable = DEFAULT_ALIASES,
    lev_max_distance: int | None = None,
) -> list[Scored]:
    """Score one slice of the corpus; only positive scores are kept.

    ``offset`` is the slice's start position in the full corpus so that results
    from several slices can be merged back in corpus order.
    """
    q = query if isinstance(query, QueryFeatures) else QueryFeatures.of(query)
    out: list[Scored] = []
    for i, doc in enumerate(documents):
        s = score_document(
            q,
            doc,
            weights=weights,
            kind_bias=kind_bias,
            aliases=aliases,
            lev_max_distance=lev_max_distance,
        )
        if s.total > 0:
            out.append((offset + i, Match(doc.tag, doc.text, doc.full_response, s.total)))
    return out


def merge_ranked(partitions: Iterable[Iterable[Scored]]) -> list[Match]:
    """Union of scored partitions, score-descending, ties in corpus order."""
    pooled = [item for part in partitions for item in part]
    pooled.sort(key=lambda item: (-item[1].score, item[0]))
    return [m for _i, m in pooled]


def rank(
    query: str,
    corpus: Corpus,
    top_k: int = 10,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    kind_bias: Mapping[DocKind, float] = KIND_BIAS,
    aliases: AliasTable = DEFAULT_ALIASES,
    lev_max_distance: int | None = None,
) -> RetrievalResult:
    """Rank a prebuilt corpus against ``query``."""
    q = QueryFeatures.of(query)
    relatedness = global_relatedness(q.token_set, corpus.vocabulary)
    scored = score_corpus(
        q,
        corpus.documents,
        weights=weights,
        kind_bias=kind_bias,
        aliases=aliases,
        lev_max_distance=lev_max_distance,
    )
    return to_result(merge_ranked([scored]), top_k, relatedness)


def to_result(ranked: Sequence[Match], top_k: int, relatedness: float) -> RetrievalResult:
    top = tuple(ranked[: max(0, int(top_k))])
    best = top[0] if top else NO_MATCH
    return RetrievalResult(top=top, best=best, global_relatedness=relatedness)


def retrieve(
    query: str,
    kb: KnowledgeBase,
    top_k: int = 10,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    kind_bias: Mapping[DocKind, float] = KIND_BIAS,
    aliases: AliasTable = DEFAULT_ALIASES,
    lev_max_distance: int | None = None,
) -> RetrievalResult:
    """Match ``query`` against ``kb``; builds the corpus fresh on every call.

    Never raises: an empty knowledge base gives an empty ``top``, ``NO_MATCH`` and
    zero relatedness.
    """
    return rank(
        query,
        Corpus.build(kb),
        top_k,
        weights=weights,
        kind_bias=kind_bias,
        aliases=aliases,
        lev_max_distance=lev_max_distance,
    )
