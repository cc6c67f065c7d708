from __future__ import annotations

from typing import Protocol


class LLMPort(Protocol):
    """Abstract language model interface for answering from retrieved context."""

    def ask(
        self,
        question: str,
        context: str,
        *,
        dialogue_context: str = "",
        language: str = "en",
    ) -> str:  # pragma: no cover - interface
        ...
