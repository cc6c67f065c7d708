from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.document import DocKind, Document
from src.domain.knowledge import KnowledgeBase
from src.domain.text_norm import tokenize

# Terminator stays attached to its sentence; includes the Arabic question mark
_SENTENCE_END = re.compile(r"(?<=[.!?؟])\s+")
_TAG_SEPARATORS = re.compile(r"[/\-()\[\],;]+")


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_END.split(text or "") if s.strip()]


def split_tag(tag: str) -> list[str]:
    return [t.strip() for t in _TAG_SEPARATORS.split(tag or "") if t.strip()]


def build_corpus(kb: KnowledgeBase) -> list[Document]:
    """Flatten the knowledge base into documents.

    Per intent, in order: one document per pattern, one per response sentence,
    one per tag segment. This order is the tie-break order used by ranking.
    """
    docs: list[Document] = []
    for intent in kb.intents:
        base = intent.base_response
        for pattern in intent.patterns:
            docs.append(Document(pattern, intent.tag, DocKind.PATTERN, base))
        for response in intent.responses:
            for sentence in split_sentences(response):
                docs.append(Document(sentence, intent.tag, DocKind.RESPONSE, response))
        for segment in split_tag(intent.tag):
            docs.append(Document(segment, intent.tag, DocKind.TAG, base))
    return docs


@dataclass(frozen=True)
class Corpus:
    """Documents of one knowledge base plus the vocabulary used for global relatedness."""

    documents: tuple[Document, ...]
    vocabulary: frozenset[str]
    fingerprint: str = ""

    @classmethod
    def build(
        cls, kb: KnowledgeBase, *, min_token_len: int = 3, fingerprint: str | None = None
    ) -> Corpus:
        docs = tuple(build_corpus(kb))
        return cls(
            documents=docs,
            vocabulary=corpus_vocabulary(docs, min_token_len=min_token_len),
            fingerprint=kb.fingerprint() if fingerprint is None else fingerprint,
        )

    def __len__(self) -> int:
        return len(self.documents)


def corpus_vocabulary(docs: Iterable[Document], *, min_token_len: int = 3) -> frozenset[str]:
    vocab: set[str] = set()
    for d in docs:
        vocab.update(t for t in tokenize(d.text) if len(t) >= min_token_len)
    return frozenset(vocab)
