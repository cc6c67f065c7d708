from __future__ import annotations

from typing import Protocol


class TopicClassifierPort(Protocol):
    """Cheap pattern-based topic check used by the answer/defer/refuse decision."""

    def is_health_like(self, text: str) -> bool:  # pragma: no cover - interface
        ...
