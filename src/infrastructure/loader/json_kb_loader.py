from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.application.ports.knowledge_base_port import KnowledgeBaseLoaderPort
from src.core.exceptions import ConfigurationError, KnowledgeBaseError
from src.domain.knowledge import Intent, KnowledgeBase

log = logging.getLogger(__name__)


class IntentRecord(BaseModel):
    """One record of the on-disk intents file. Missing lists degrade to empty."""

    model_config = ConfigDict(extra="ignore")

    tag: str = ""
    patterns: list[str] = Field(default_factory=list)
    responses: list[str] = Field(default_factory=list)

    @field_validator("patterns", "responses", mode="before")
    @classmethod
    def _none_to_empty(cls, v):  # type: ignore[no-untyped-def]
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    def to_domain(self) -> Intent:
        return Intent(
            tag=self.tag,
            patterns=tuple(self.patterns),
            responses=tuple(self.responses),
        )


class KnowledgeBaseRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    intents: list[IntentRecord] = Field(default_factory=list)

    def to_domain(self) -> KnowledgeBase:
        return KnowledgeBase.from_intents(r.to_domain() for r in self.intents)


def parse_knowledge_base(raw: str | bytes) -> KnowledgeBase:
    try:
        record = KnowledgeBaseRecord.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"intents file is not valid JSON: {e}") from e
    except ValidationError as e:
        raise KnowledgeBaseError(f"intents file does not match the schema: {e}") from e
    return record.to_domain()


@dataclass
class JsonKnowledgeBaseLoader(KnowledgeBaseLoaderPort):
    """Load ``{"intents": [{"tag", "patterns", "responses"}, ...]}`` from disk."""

    path: Path

    def load(self) -> KnowledgeBase:
        p = Path(self.path)
        if not p.is_file():
            raise ConfigurationError(f"intents file not found: {p}")
        kb = parse_knowledge_base(p.read_text(encoding="utf-8"))
        log.info("loaded %d intents from %s", len(kb.intents), p)
        return kb


__all__ = ["JsonKnowledgeBaseLoader", "parse_knowledge_base"]
