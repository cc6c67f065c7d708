from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from src.application.ports.topic_classifier_port import TopicClassifierPort

# Includes common misspellings of antibiotic names
HEALTH_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(health|doctor|clinic|hospital|symptom|fever|pain|rash|period|puberty|pregnan"
        r"|sexual|sex|std|sti|anxiety|depress|stress)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(medicine|medication|drug|pill|tablet|syrup|dose|dosage|mg|ml)\b", re.IGNORECASE
    ),
    re.compile(
        r"\b(antibiot(ic|ics)?|antibit|antibiotoc|antibitocs|antibotic|antibotics)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(paracetamol|acetaminophen|panadol|ibuprofen|amoxicillin|augmentin|penicillin)\b",
        re.IGNORECASE,
    ),
)


@dataclass
class RegexHealthClassifier(TopicClassifierPort):
    patterns: Sequence[re.Pattern[str]] = field(default_factory=lambda: HEALTH_PATTERNS)

    def is_health_like(self, text: str) -> bool:
        t = text or ""
        return any(rx.search(t) for rx in self.patterns)


__all__ = ["HEALTH_PATTERNS", "RegexHealthClassifier"]
