from __future__ import annotations

import pytest

from src.domain.text_norm import normalize, padded, token_set, tokenize


def test_normalize_lowercases_and_strips_punctuation() -> None:
    assert normalize("Hello, World!") == "hello world"
    assert normalize("self-stimulation") == "self stimulation"
    assert normalize("a_b") == "a b"


def test_normalize_compatibility_forms() -> None:
    # fullwidth letters and ligatures collapse to their plain forms
    assert normalize("Ｈｅｌｌｏ") == "hello"
    assert normalize("ﬁne") == "fine"


def test_normalize_is_total() -> None:
    assert normalize("") == ""
    assert normalize("   ") == ""
    assert normalize("!!! ??? ...") == ""
    assert normalize("acne 😢") == "acne"


def test_normalize_keeps_arabic_letters_and_drops_arabic_question_mark() -> None:
    assert normalize("ما سبب حب الشباب؟") == "ما سبب حب الشباب"


@pytest.mark.parametrize(
    "text",
    [
        "Hello,   World!!",
        "ℌello İstanbul ß ﬁ",
        "ما سبب حب الشباب؟",
        "  tabs\tand\nnewlines  ",
        "12 mg / 5ml",
        "",
        "😀😀",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once


def test_tokenize_preserves_order_and_duplicates() -> None:
    assert tokenize("What causes ACNE? acne!") == ["what", "causes", "acne", "acne"]
    assert tokenize("") == []
    assert token_set("acne acne pimples") == frozenset({"acne", "pimples"})


def test_padded_wraps_normalized_text() -> None:
    assert padded("Male-Organ") == " male organ "
