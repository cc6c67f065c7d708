from __future__ import annotations

"""Composition root: assemble and expose application use-cases.

Provides cached getters so long-lived processes (API/CLI) load the knowledge base
and build its corpus once. Keeps environment/settings handling inside the config layer.
"""

from functools import lru_cache  # noqa: E402

from src.application.use_cases import ChatUseCase, QueryUseCase  # noqa: E402
from src.config.composition import build_chat_use_case, build_query_use_case  # noqa: E402


@lru_cache(maxsize=1)
def get_query_use_case() -> QueryUseCase:
    return build_query_use_case()


@lru_cache(maxsize=1)
def get_chat_use_case() -> ChatUseCase:
    # Shares the query use-case so both see the same loaded knowledge base
    return build_chat_use_case(query=get_query_use_case())


def configure_app() -> tuple[QueryUseCase, ChatUseCase]:
    """Convenience function returning both primary use-cases.

    Returns:
        (query_use_case, chat_use_case)
    """
    return get_query_use_case(), get_chat_use_case()


def reset_app() -> None:
    """Drop cached use-cases (e.g. after the intents file changed)."""
    get_chat_use_case.cache_clear()
    get_query_use_case.cache_clear()


__all__ = [
    "get_query_use_case",
    "get_chat_use_case",
    "configure_app",
    "reset_app",
]
