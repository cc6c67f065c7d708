from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Intent:
    """A labeled concept with example phrasings and canned answers."""

    tag: str
    patterns: tuple[str, ...] = ()
    responses: tuple[str, ...] = ()

    @property
    def base_response(self) -> str:
        return self.responses[0] if self.responses else ""


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable, shared, read-only collection of intents."""

    intents: tuple[Intent, ...] = field(default_factory=tuple)

    @classmethod
    def from_intents(cls, intents: Iterable[Intent]) -> KnowledgeBase:
        return cls(intents=tuple(intents))

    def __len__(self) -> int:
        return len(self.intents)

    def fingerprint(self) -> str:
        """Stable content hash; equal content gives an equal fingerprint."""
        payload = [
            {"tag": it.tag, "patterns": list(it.patterns), "responses": list(it.responses)}
            for it in self.intents
        ]
        raw = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

