from __future__ import annotations

from src.api.routes.chat import post_chat
from src.application.use_cases import ChatUseCase, QueryUseCase
from src.domain.knowledge import KnowledgeBase


class _Loader:
    def __init__(self, kb: KnowledgeBase) -> None:
        self.kb = kb

    def load(self) -> KnowledgeBase:
        return self.kb


class _Broken:
    def respond(self, messages):  # type: ignore[no-untyped-def]
        raise RuntimeError("upstream down")


def test_missing_messages_is_400() -> None:
    body, status = post_chat({}, use_case=lambda: None)  # type: ignore[arg-type,return-value]
    assert status == 400
    assert body == {"error": "Missing messages"}


def test_invalid_role_is_400() -> None:
    req = {"messages": [{"role": "robot", "content": "hi"}]}
    body, status = post_chat(req, use_case=lambda: None)  # type: ignore[arg-type,return-value]
    assert status == 400
    assert body["error"].startswith("Invalid messages")


def test_chat_reply_and_meta(acne_kb: KnowledgeBase) -> None:
    uc = ChatUseCase(query=QueryUseCase(loader=_Loader(acne_kb)))
    req = {"messages": [{"role": "user", "content": "what causes acne"}]}
    body, status = post_chat(req, use_case=lambda: uc)
    assert status == 200
    assert body["meta"]["reason"] == "covered"
    assert body["reply"].startswith("Q: what causes pimples")


def test_unexpected_failure_is_500() -> None:
    req = {"messages": [{"role": "user", "content": "acne"}]}
    body, status = post_chat(req, use_case=lambda: _Broken())  # type: ignore[arg-type,return-value]
    assert status == 500
    assert body == {"error": "upstream down"}
