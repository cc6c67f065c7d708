from __future__ import annotations

"""Composition helpers building use-cases with configured adapters.

Keeps environment/settings handling out of the interface layer.
"""

from src.application.use_cases import ChatUseCase, DialogueConfig, QueryUseCase  # noqa: E402
from src.config.llm import build_llm_from_env  # noqa: E402
from src.core.settings import Settings, get_settings  # noqa: E402
from src.domain.policy import Thresholds  # noqa: E402
from src.infrastructure.classifiers.health import RegexHealthClassifier  # noqa: E402
from src.infrastructure.loader.json_kb_loader import JsonKnowledgeBaseLoader  # noqa: E402


def build_query_use_case(settings: Settings | None = None) -> QueryUseCase:
    s = settings or get_settings()
    d = s.dialogue
    return QueryUseCase(
        loader=JsonKnowledgeBaseLoader(s.intents_path),
        top_k=int(s.top_k),
        workers=int(s.workers),
        lev_max_distance=s.lev_max_distance,
        dialogue=DialogueConfig(
            max_back=int(d.max_back),
            sim_threshold=float(d.sim_threshold),
            max_pairs=int(d.max_pairs),
        ),
    )


def build_chat_use_case(
    settings: Settings | None = None, query: QueryUseCase | None = None
) -> ChatUseCase:
    s = settings or get_settings()
    t = s.thresholds
    return ChatUseCase(
        query=query or build_query_use_case(s),
        llm=build_llm_from_env(settings=s.llm),
        classifier=RegexHealthClassifier(),
        thresholds=Thresholds(
            best_min=float(t.best_min),
            related_min=float(t.related_min),
            domain_signal_min=float(t.domain_signal_min),
        ),
    )


__all__ = ["build_chat_use_case", "build_query_use_case"]
