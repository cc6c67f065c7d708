from __future__ import annotations

"""Composition: construct LLMPort implementations from settings.

Defaults to DummyLLM to keep tests/offline flows working. When LLM_PROVIDER=openai
(any OpenAI-compatible endpoint via OPENAI_BASE_URL), builds an OpenAIChatLLM.
"""

from src.application.ports.llm_port import LLMPort  # noqa: E402
from src.core.settings import LLMSettings  # noqa: E402
from src.infrastructure.llm.providers import DummyLLM, OpenAIChatLLM  # noqa: E402


def build_llm_from_env(
    *,
    provider: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
    settings: LLMSettings | None = None,
) -> LLMPort:
    cfg = settings or LLMSettings()
    prov = (provider or cfg.provider or "").lower().strip()
    if prov in ("openai", "azure-openai", "openai-compatible"):
        return OpenAIChatLLM(
            model=str(model or cfg.model),
            api_key=api_key or cfg.api_key,
            base_url=base_url or cfg.base_url,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    # default
    return DummyLLM()


__all__ = ["build_llm_from_env"]
