from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from src.domain.knowledge import Intent, KnowledgeBase


@pytest.fixture
def acne_kb() -> KnowledgeBase:
    return KnowledgeBase.from_intents(
        [
            Intent(
                tag="acne",
                patterns=("what causes pimples",),
                responses=("Pimples are caused by clogged pores.",),
            )
        ]
    )


@pytest.fixture
def health_kb() -> KnowledgeBase:
    return KnowledgeBase.from_intents(
        [
            Intent(
                tag="acne",
                patterns=("what causes pimples", "how do I get rid of acne"),
                responses=(
                    "Pimples are caused by clogged pores. Wash your face gently twice a day.",
                ),
            ),
            Intent(
                tag="period / menstruation",
                patterns=("what is a period", "is it normal for my period to be irregular"),
                responses=("A period is the monthly shedding of the lining of the uterus.",),
            ),
            Intent(
                tag="sleep",
                patterns=("how much sleep do teenagers need",),
                responses=("Most teenagers need eight to ten hours of sleep. Keep a routine!",),
            ),
        ]
    )


@pytest.fixture
def write_intents(tmp_path: Path) -> Callable[[object], Path]:
    def _write(payload: object, name: str = "intents.json") -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return p

    return _write
