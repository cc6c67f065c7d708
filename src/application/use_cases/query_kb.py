from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from src.application.ports.knowledge_base_port import KnowledgeBaseLoaderPort
from src.application.services.corpus_cache import CorpusCache
from src.domain.aliases import DEFAULT_ALIASES, AliasTable
from src.domain.dialogue import (
    MAX_BACK,
    MAX_PAIRS,
    SIM_THRESHOLD,
    ConversationTurn,
    build_dialogue_context,
)
from src.domain.document import DocKind
from src.domain.indexing import Corpus
from src.domain.knowledge import KnowledgeBase
from src.domain.retrieval import (
    RetrievalResult,
    Scored,
    global_relatedness,
    merge_ranked,
    score_corpus,
    to_result,
)
from src.domain.scoring import DEFAULT_WEIGHTS, KIND_BIAS, QueryFeatures, ScoringWeights

log = logging.getLogger(__name__)


@dataclass
class DialogueConfig:
    max_back: int = MAX_BACK
    sim_threshold: float = SIM_THRESHOLD
    max_pairs: int = MAX_PAIRS


@dataclass
class QueryUseCase:
    loader: KnowledgeBaseLoaderPort
    top_k: int = 10
    workers: int = 1
    lev_max_distance: int | None = None
    weights: ScoringWeights = DEFAULT_WEIGHTS
    kind_bias: Mapping[DocKind, float] = field(default_factory=lambda: KIND_BIAS)
    aliases: AliasTable = DEFAULT_ALIASES
    dialogue: DialogueConfig = field(default_factory=DialogueConfig)
    cache: CorpusCache = field(default_factory=CorpusCache)
    _kb: KnowledgeBase | None = field(default=None, init=False, repr=False)

    def knowledge_base(self) -> KnowledgeBase:
        """Knowledge base loaded once per use-case lifetime."""
        if self._kb is None:
            self._kb = self.loader.load()
            log.info("kb.loaded intents=%d", len(self._kb.intents))
        return self._kb

    def reload(self) -> KnowledgeBase:
        self._kb = None
        self.cache.clear()
        return self.knowledge_base()

    def corpus(self) -> Corpus:
        return self.cache.get(self.knowledge_base())

    def retrieve(self, query: str, *, k: int | None = None) -> RetrievalResult:
        """Rank the cached corpus against ``query``.

        With ``workers > 1`` the corpus is scored in contiguous partitions on a thread
        pool; merging keeps the corpus-order tie-break, so results are identical.
        """
        corpus = self.corpus()
        top_k = self.top_k if k is None else k
        q = QueryFeatures.of(query)
        relatedness = global_relatedness(q.token_set, corpus.vocabulary)

        partitions = self._score_partitions(q, corpus)
        result = to_result(merge_ranked(partitions), top_k, relatedness)
        log.debug(
            "retrieval.corpus_size=%d partitions=%d best=%.3f related=%.3f",
            len(corpus),
            len(partitions),
            result.best.score,
            result.global_relatedness,
        )
        return result

    def _score_partitions(self, q: QueryFeatures, corpus: Corpus) -> list[list[Scored]]:
        docs = corpus.documents
        kwargs = {
            "weights": self.weights,
            "kind_bias": self.kind_bias,
            "aliases": self.aliases,
            "lev_max_distance": self.lev_max_distance,
        }
        workers = max(1, int(self.workers))
        if workers == 1 or len(docs) < 2 * workers:
            return [score_corpus(q, docs, **kwargs)]

        size = -(-len(docs) // workers)
        bounds = [(start, docs[start : start + size]) for start in range(0, len(docs), size)]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(score_corpus, q, part, offset=start, **kwargs)
                for start, part in bounds
            ]
            return [f.result() for f in futures]

    def dialogue_context(self, conversation: Sequence[ConversationTurn], latest: str) -> str:
        return build_dialogue_context(
            conversation,
            latest,
            max_back=self.dialogue.max_back,
            threshold=self.dialogue.sim_threshold,
            max_pairs=self.dialogue.max_pairs,
        )
