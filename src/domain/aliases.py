from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from src.domain.text_norm import normalize, padded

# canonical term -> equivalent phrasings (English and Arabic)
DEFAULT_ALIAS_GROUPS: dict[str, tuple[str, ...]] = {
    "masturbation": (
        "self-stimulation",
        "self stimulation",
        "self-pleasure",
        "self pleasure",
        "solo sex",
    ),
    "pimples": ("acne", "zits", "spots"),
    "period": ("menstruation", "menstrual", "menses"),
    "penis": ("male organ",),
    "vagina": ("female organ",),
    "العادة": ("العادة السرية", "الاستمناء", "استمناء"),
    "حب": ("حب الشباب", "بثور"),
}


@dataclass(frozen=True)
class AliasTable:
    """Synonym groups plus the per-group increment and total cap of the boost."""

    groups: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_ALIAS_GROUPS)
    )
    increment: float = 0.08
    cap: float = 0.2

    def needles(self) -> list[tuple[str, ...]]:
        """Space-padded normalized forms of every group (canonical term first)."""
        out: list[tuple[str, ...]] = []
        for canonical, aliases in self.groups.items():
            forms = [f" {normalize(canonical)} "]
            forms.extend(f" {normalize(a)} " for a in aliases)
            out.append(tuple(f for f in forms if f.strip()))
        return out


DEFAULT_ALIASES = AliasTable()


def alias_boost(query: str, candidate: str, table: AliasTable = DEFAULT_ALIASES) -> float:
    """Bonus for query/candidate pairs naming the same concept with different words.

    Every group hit by both texts adds ``table.increment``; the total is capped at
    ``table.cap``. Matching is on whole normalized words, so "spots" does not hit "spotsy".
    """
    q = padded(query)
    c = padded(candidate)
    boost = 0.0
    for forms in table.needles():
        if any(f in q for f in forms) and any(f in c for f in forms):
            boost += table.increment
    return max(0.0, min(table.cap, boost))
