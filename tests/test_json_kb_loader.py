from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from src.core.exceptions import ConfigurationError, KnowledgeBaseError
from src.domain.knowledge import Intent
from src.infrastructure.loader.json_kb_loader import JsonKnowledgeBaseLoader, parse_knowledge_base


def test_loads_intents_in_file_order(write_intents: Callable[..., Path]) -> None:
    path = write_intents(
        {
            "intents": [
                {"tag": "acne", "patterns": ["what causes pimples"], "responses": ["Pores."]},
                {
                    "tag": "حب الشباب",
                    "patterns": ["ما سبب حب الشباب"],
                    "responses": ["المسام."],
                },
            ]
        }
    )
    kb = JsonKnowledgeBaseLoader(path).load()
    assert [it.tag for it in kb.intents] == ["acne", "حب الشباب"]
    assert kb.intents[0] == Intent("acne", ("what causes pimples",), ("Pores.",))


def test_missing_or_null_lists_become_empty() -> None:
    kb = parse_knowledge_base(
        '{"intents": [{"tag": "a"}, {"tag": "b", "patterns": null, "responses": "one"}]}'
    )
    assert kb.intents[0] == Intent("a", (), ())
    assert kb.intents[1] == Intent("b", (), ("one",))


def test_extra_fields_are_ignored() -> None:
    kb = parse_knowledge_base('{"version": 2, "intents": [{"tag": "a", "context": ["x"]}]}')
    assert len(kb) == 1
    assert parse_knowledge_base("{}").intents == ()


@pytest.mark.parametrize("raw", ["not json", '{"intents": 5}', '{"intents": [{"patterns": 3}]}'])
def test_malformed_file_raises_knowledge_base_error(raw: str) -> None:
    with pytest.raises(KnowledgeBaseError):
        parse_knowledge_base(raw)


def test_missing_file_is_a_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="intents file not found"):
        JsonKnowledgeBaseLoader(tmp_path / "nope.json").load()


def test_bundled_sample_parses() -> None:
    sample = Path(__file__).resolve().parents[1] / "data" / "intents_merged.json"
    kb = JsonKnowledgeBaseLoader(sample).load()
    assert len(kb) >= 1
    assert all(it.tag for it in kb.intents)
