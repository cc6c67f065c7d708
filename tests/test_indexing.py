from __future__ import annotations

from src.domain.document import DocKind
from src.domain.indexing import Corpus, build_corpus, split_sentences, split_tag
from src.domain.knowledge import Intent, KnowledgeBase


def test_split_sentences_keeps_terminators() -> None:
    text = "Pimples are caused by clogged pores. Hormones matter! Really? Yes"
    assert split_sentences(text) == [
        "Pimples are caused by clogged pores.",
        "Hormones matter!",
        "Really?",
        "Yes",
    ]


def test_split_sentences_arabic_question_mark_and_no_split_without_space() -> None:
    assert split_sentences("سؤال؟ جواب.") == ["سؤال؟", "جواب."]
    assert split_sentences("e.g.this stays") == ["e.g.this stays"]
    assert split_sentences("   ") == []


def test_split_tag_on_separator_runs() -> None:
    assert split_tag("period / menstruation") == ["period", "menstruation"]
    assert split_tag("a-(b)[c],d;e") == ["a", "b", "c", "d", "e"]
    assert split_tag("--//") == []
    assert split_tag("acne") == ["acne"]


def test_build_corpus_order_and_full_response() -> None:
    kb = KnowledgeBase.from_intents(
        [
            Intent(
                tag="acne/skin",
                patterns=("what causes pimples",),
                responses=("First. Second!", "Other answer."),
            )
        ]
    )
    docs = build_corpus(kb)

    assert [(d.kind, d.text) for d in docs] == [
        (DocKind.PATTERN, "what causes pimples"),
        (DocKind.RESPONSE, "First."),
        (DocKind.RESPONSE, "Second!"),
        (DocKind.RESPONSE, "Other answer."),
        (DocKind.TAG, "acne"),
        (DocKind.TAG, "skin"),
    ]
    # pattern/tag documents answer with the first response, response sentences with their own
    assert docs[0].full_response == "First. Second!"
    assert docs[2].full_response == "First. Second!"
    assert docs[3].full_response == "Other answer."
    assert docs[5].full_response == "First. Second!"
    assert all(d.tag == "acne/skin" for d in docs)


def test_build_corpus_degrades_for_incomplete_intents() -> None:
    kb = KnowledgeBase.from_intents([Intent(tag="lonely"), Intent(tag="")])
    docs = build_corpus(kb)
    assert len(docs) == 1
    assert docs[0].kind is DocKind.TAG
    assert docs[0].full_response == ""


def test_corpus_vocabulary_skips_short_tokens(acne_kb: KnowledgeBase) -> None:
    corpus = Corpus.build(acne_kb)
    assert "what" in corpus.vocabulary
    assert "acne" in corpus.vocabulary
    assert "by" not in corpus.vocabulary
    assert corpus.fingerprint == acne_kb.fingerprint()
    assert len(corpus) == 3


def test_fingerprint_tracks_content() -> None:
    a = KnowledgeBase.from_intents([Intent("t", ("p",), ("r",))])
    b = KnowledgeBase.from_intents([Intent("t", ("p",), ("r",))])
    c = KnowledgeBase.from_intents([Intent("t", ("p",), ("r2",))])
    assert a.fingerprint() == b.fingerprint()
    assert a.fingerprint() != c.fingerprint()
