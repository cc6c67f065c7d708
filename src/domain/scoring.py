from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from src.domain.aliases import DEFAULT_ALIASES, AliasTable, alias_boost
from src.domain.document import DocKind, Document
from src.domain.text_norm import normalize


@dataclass(frozen=True)
class ScoringWeights:
    """Composite score weights. Empirical baseline, tune freely."""

    jaccard: float = 0.5
    levenshtein: float = 0.32
    overlap: float = 0.14


DEFAULT_WEIGHTS = ScoringWeights()

KIND_BIAS: Mapping[DocKind, float] = MappingProxyType(
    {
        DocKind.RESPONSE: 0.04,
        DocKind.PATTERN: 0.02,
        DocKind.TAG: 0.0,
    }
)


def jaccard(a: Collection[str], b: Collection[str]) -> float:
    sa, sb = set(a), set(b)
    union = len(sa | sb) or 1
    return len(sa & sb) / union


def levenshtein(a: str, b: str, max_distance: int | None = None) -> int:
    """Single-character insert/delete/substitute distance.

    With ``max_distance`` set, gives up as soon as every cell of a DP row exceeds
    the band and returns ``max_distance + 1``. Without it the result is exact.
    """
    if a == b:
        return 0
    m, n = len(a), len(b)
    if not m:
        return n
    if not n:
        return m
    if max_distance is not None and abs(m - n) > max_distance:
        return max_distance + 1

    prev = list(range(n + 1))
    for i in range(1, m + 1):
        cur = [i] + [0] * n
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            cur[j] = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
        if max_distance is not None and min(cur) > max_distance:
            return max_distance + 1
        prev = cur
    dist = prev[n]
    if max_distance is not None and dist > max_distance:
        return max_distance + 1
    return dist


def lev_similarity(a: str, b: str, max_distance: int | None = None) -> float:
    """1 - distance / longest length (floored at 1), so two empty strings give 1.0."""
    dist = levenshtein(a, b, max_distance=max_distance)
    return 1.0 - dist / max(1, len(a), len(b))


def overlap_ratio(query_tokens: Sequence[str], doc_tokens: Iterable[str]) -> float:
    """Doc tokens found in the query, over the query's token count. Not clamped."""
    qset = set(query_tokens)
    hits = sum(1 for t in doc_tokens if t in qset)
    return hits / max(1, len(query_tokens))


@dataclass(frozen=True)
class QueryFeatures:
    raw: str
    norm: str
    tokens: tuple[str, ...]
    token_set: frozenset[str]

    @classmethod
    def of(cls, query: str) -> QueryFeatures:
        norm = normalize(query)
        tokens = tuple(t for t in norm.split(" ") if t)
        return cls(raw=query or "", norm=norm, tokens=tokens, token_set=frozenset(tokens))


@dataclass(frozen=True)
class ScoreBreakdown:
    jaccard: float
    levenshtein: float
    overlap: float
    alias: float
    kind_bias: float
    total: float


def score_document(
    query: QueryFeatures | str,
    doc: Document,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    kind_bias: Mapping[DocKind, float] = KIND_BIAS,
    aliases: AliasTable = DEFAULT_ALIASES,
    lev_max_distance: int | None = None,
) -> ScoreBreakdown:
    q = query if isinstance(query, QueryFeatures) else QueryFeatures.of(query)
    dnorm = normalize(doc.text)
    dtokens = [t for t in dnorm.split(" ") if t]

    jac = jaccard(q.token_set, dtokens)
    lev = lev_similarity(q.norm, dnorm, max_distance=lev_max_distance)
    ovl = min(1.0, overlap_ratio(q.tokens, dtokens))
    alias = alias_boost(q.raw, doc.text, aliases)
    bias = float(kind_bias.get(doc.kind, 0.0))

    total = (
        weights.jaccard * jac
        + weights.levenshtein * lev
        + weights.overlap * ovl
        + alias
        + bias
    )
    return ScoreBreakdown(
        jaccard=jac,
        levenshtein=lev,
        overlap=ovl,
        alias=alias,
        kind_bias=bias,
        total=total,
    )
