from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.domain.scoring import jaccard
from src.domain.text_norm import token_set

MAX_BACK = 8
SIM_THRESHOLD = 0.2
MAX_PAIRS = 2


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    role: Role
    content: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConversationTurn:
        return cls(
            role=Role(str(data.get("role", "")).strip().lower()),
            content=str(data.get("content") or ""),
        )

    @classmethod
    def user(cls, content: str) -> ConversationTurn:
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> ConversationTurn:
        return cls(Role.ASSISTANT, content)


@dataclass(frozen=True)
class DialoguePair:
    question: str
    answer: str

    def render(self) -> str:
        return f"Q: {self.question}\nA: {self.answer}"


def select_related_pairs(
    conversation: Sequence[ConversationTurn],
    latest: str,
    *,
    max_back: int = MAX_BACK,
    threshold: float = SIM_THRESHOLD,
    max_pairs: int = MAX_PAIRS,
) -> list[DialoguePair]:
    """Prior user turns similar to ``latest``, most recent first, with their answers.

    ``conversation`` excludes the in-flight message. Only the last ``max_back`` turns
    are considered; a turn's answer is the next turn in that window when it is an
    assistant turn, else "".
    """
    if max_back <= 0 or max_pairs <= 0:
        return []
    window = list(conversation)[-max_back:]
    latest_tokens = token_set(latest)
    related: list[DialoguePair] = []
    for i in range(len(window) - 1, -1, -1):
        turn = window[i]
        if turn.role is not Role.USER:
            continue
        if jaccard(token_set(turn.content), latest_tokens) < threshold:
            continue
        nxt = window[i + 1] if i + 1 < len(window) else None
        answer = nxt.content if nxt is not None and nxt.role is Role.ASSISTANT else ""
        related.append(DialoguePair(turn.content, answer))
        if len(related) >= max_pairs:
            break
    return related


def build_dialogue_context(
    conversation: Sequence[ConversationTurn],
    latest: str,
    *,
    max_back: int = MAX_BACK,
    threshold: float = SIM_THRESHOLD,
    max_pairs: int = MAX_PAIRS,
) -> str:
    """Render up to ``max_pairs`` related exchanges as Q/A blocks; "" when none qualify."""
    pairs = select_related_pairs(
        conversation, latest, max_back=max_back, threshold=threshold, max_pairs=max_pairs
    )
    return "\n\n".join(p.render() for p in pairs)


def split_latest(
    messages: Sequence[ConversationTurn],
) -> tuple[list[ConversationTurn], str]:
    """Split a full message list into (prior turns, content of the last message)."""
    if not messages:
        return [], ""
    return list(messages[:-1]), messages[-1].content
