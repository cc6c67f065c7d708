from __future__ import annotations

from typing import Protocol

from src.domain.knowledge import KnowledgeBase


class KnowledgeBaseLoaderPort(Protocol):
    def load(self) -> KnowledgeBase:  # pragma: no cover - interface
        ...
