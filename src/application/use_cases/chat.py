from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.application.ports.llm_port import LLMPort
from src.application.ports.topic_classifier_port import TopicClassifierPort
from src.application.use_cases.query_kb import QueryUseCase
from src.domain.context import assemble_context
from src.domain.dialogue import ConversationTurn, split_latest
from src.domain.language import reply_language
from src.domain.policy import Action, Decision, Thresholds, decide

log = logging.getLogger(__name__)

DEFER_COPY = {
    "en": "It’s better to ask a doctor or a trusted adult.",
    "ar": "من الأفضل سؤال طبيب أو شخص بالغ موثوق.",
}
REFUSE_COPY = {
    "en": "I cant answer this question",
    "ar": "I cant answer this question",
}


@dataclass
class ChatReply:
    reply: str
    decision: Decision
    meta: dict[str, Any] = field(default_factory=dict)


def enrich_query(latest: str, dialogue_context: str) -> str:
    """Retrieval query: the latest message plus related prior exchanges, if any."""
    if not dialogue_context:
        return latest
    return f"{latest}\n\nFollow-up context (for meaning only):\n{dialogue_context}"


@dataclass
class ChatUseCase:
    query: QueryUseCase
    llm: LLMPort | None = None
    classifier: TopicClassifierPort | None = None
    thresholds: Thresholds = field(default_factory=Thresholds)

    def _health_like(self, text: str) -> bool:
        return bool(self.classifier is not None and self.classifier.is_health_like(text))

    def respond(self, messages: Sequence[ConversationTurn]) -> ChatReply:
        """Answer the last message of ``messages`` from the knowledge base.

        1) Pull related earlier exchanges into the retrieval query
        2) Retrieve top-k matches
        3) Decide answer / defer / refuse
        4) Ask the LLM with CONTEXT (+ DIALOGUE CONTEXT); without an LLM the
           assembled context is returned as the reply
        """
        if not messages:
            raise ValueError("Missing messages")

        history, latest = split_latest(messages)
        lang = reply_language(latest)
        dialogue_ctx = self.query.dialogue_context(history, latest)
        result = self.query.retrieve(enrich_query(latest, dialogue_ctx))

        health_like = self._health_like(latest)
        decision = decide(result, health_like=health_like, thresholds=self.thresholds)
        log.info(
            "chat.decision=%s reason=%s best=%.3f related=%.3f",
            decision.action.value,
            decision.reason,
            result.best.score,
            result.global_relatedness,
        )
        meta: dict[str, Any] = {
            "reason": decision.reason,
            "bestScore": result.best.score,
            "globalRelatedness": result.global_relatedness,
            "language": lang,
        }

        if decision.action is Action.REFUSE:
            return ChatReply(REFUSE_COPY[lang], decision, meta)
        if decision.action is Action.DEFER:
            return ChatReply(DEFER_COPY[lang], decision, meta)

        context = assemble_context(result.top)
        meta["usedSnippets"] = len(result.top)
        if self.llm is None:
            return ChatReply(context, decision, meta)
        reply = self.llm.ask(latest, context, dialogue_context=dialogue_ctx, language=lang)
        return ChatReply(reply, decision, meta)
