"""Corpus cache keyed by knowledge-base content, reused across retrieval calls."""
from __future__ import annotations

import threading
from dataclasses import dataclass

from src.domain.indexing import Corpus
from src.domain.knowledge import KnowledgeBase


@dataclass(slots=True)
class _State:
    corpus: Corpus | None
    fingerprint: str
    source: KnowledgeBase | None = None


class CorpusCache:
    """Builds the corpus once per knowledge-base fingerprint.

    Concurrent callers share the same immutable ``Corpus``; a knowledge base with
    different content replaces it. Passing the same ``KnowledgeBase`` object again
    skips hashing its content.
    """

    def __init__(self) -> None:
        self._state = _State(corpus=None, fingerprint="")
        self._lock = threading.Lock()
        self.builds = 0

    def get(self, kb: KnowledgeBase) -> Corpus:
        state = self._state
        if state.corpus is not None and state.source is kb:
            return state.corpus
        fingerprint = kb.fingerprint()
        with self._lock:
            state = self._state
            if state.corpus is not None and state.fingerprint == fingerprint:
                self._state = _State(state.corpus, fingerprint, kb)
                return state.corpus
            corpus = Corpus.build(kb, fingerprint=fingerprint)
            self._state = _State(corpus=corpus, fingerprint=fingerprint, source=kb)
            self.builds += 1
            return corpus

    def clear(self) -> None:
        with self._lock:
            self._state = _State(corpus=None, fingerprint="")


__all__ = ["CorpusCache"]
