from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.domain.retrieval import RetrievalResult


class Action(str, Enum):
    ANSWER = "answer"
    DEFER = "defer"  # send the user to a professional
    REFUSE = "refuse"  # outside the domain entirely


@dataclass(frozen=True)
class Thresholds:
    best_min: float = 0.18
    related_min: float = 0.1
    domain_signal_min: float = 0.22


@dataclass(frozen=True)
class Decision:
    action: Action
    reason: str


def decide(
    result: RetrievalResult,
    *,
    health_like: bool = False,
    thresholds: Thresholds | None = None,
) -> Decision:
    """Turn a retrieval result into answer / defer / refuse.

    Checked in order:
    1. weak best match and no domain signal: defer if health-like, else refuse
    2. health-like but best match under ``best_min``: defer
    3. best match under ``best_min`` and no domain signal: defer
    4. otherwise answer from the matches
    """
    t = thresholds or Thresholds()
    best = result.best.score
    has_domain_signal = result.global_relatedness >= t.domain_signal_min

    if best < t.related_min and not has_domain_signal:
        if health_like:
            return Decision(Action.DEFER, "ood_health_like")
        return Decision(Action.REFUSE, "out_of_domain")
    if health_like and best < t.best_min:
        return Decision(Action.DEFER, "health_like_weak_coverage")
    if best < t.best_min and not has_domain_signal:
        return Decision(Action.DEFER, "in_domain_not_covered")
    return Decision(Action.ANSWER, "covered")
