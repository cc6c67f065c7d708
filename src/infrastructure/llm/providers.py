from __future__ import annotations

"""Infrastructure LLM providers implementing the LLMPort contract.

Adapters:
- DummyLLM: dependency-free echo of the retrieved context for testing and offline use.
- OpenAIChatLLM: wraps langchain-openai ChatOpenAI; works with any OpenAI-compatible
  chat completions endpoint (set base_url for hosted agents).
"""

from dataclasses import dataclass  # noqa: E402

from src.application.ports.llm_port import LLMPort  # noqa: E402
from src.infrastructure.llm.templates import build_messages  # noqa: E402


@dataclass
class DummyLLM(LLMPort):
    """Simple test double: returns the context the answer would be grounded on."""

    def ask(
        self,
        question: str,
        context: str,
        *,
        dialogue_context: str = "",
        language: str = "en",
    ) -> str:
        return context


@dataclass
class OpenAIChatLLM(LLMPort):
    """OpenAI Chat-based LLM using langchain-openai."""

    model: str
    api_key: str | None = None
    base_url: str | None = None
    temperature: float = 0.4
    max_tokens: int | None = 512

    def __post_init__(self) -> None:  # lazy import and instantiate client
        try:
            from langchain_openai import ChatOpenAI
        except Exception as e:  # pragma: no cover - import guarded
            raise RuntimeError(
                "langchain-openai is required for OpenAIChatLLM.\n"
                "Install with: pip install langchain-openai openai"
            ) from e

        kwargs: dict[str, object] = {
            "model": self.model,
            "temperature": float(self.temperature),
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.base_url:
            kwargs["base_url"] = normalize_base_url(self.base_url)
        if self.max_tokens is not None:
            kwargs["max_tokens"] = int(self.max_tokens)
        self._chat = ChatOpenAI(**kwargs)

    def ask(
        self,
        question: str,
        context: str,
        *,
        dialogue_context: str = "",
        language: str = "en",
    ) -> str:
        messages = build_messages(
            question, context, dialogue_context=dialogue_context, language=language
        )
        try:
            resp = self._chat.invoke(messages)
        except Exception as e:
            raise RuntimeError(f"OpenAIChatLLM failed to generate: {e}") from e
        text = getattr(resp, "content", None)
        if isinstance(text, str) and text:
            return text.strip()
        return "(no reply)"


def normalize_base_url(base: str) -> str:
    """Point at the ``/v1`` root the OpenAI client appends ``/chat/completions`` to.

    Accepts ".../api/v1", ".../v1" or a bare host (which gets "/api/v1").
    """
    trimmed = (base or "").rstrip("/")
    if not trimmed:
        return trimmed
    if trimmed.endswith("/v1"):
        return trimmed
    return f"{trimmed}/api/v1"


__all__ = ["DummyLLM", "OpenAIChatLLM", "normalize_base_url"]
