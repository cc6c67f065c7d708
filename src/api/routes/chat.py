from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from src.api.services import chat_use_case
from src.application.use_cases import ChatUseCase
from src.domain.dialogue import ConversationTurn

log = logging.getLogger(__name__)


def _payload(req: Any) -> dict:
    data = req.json if hasattr(req, "json") else req
    if callable(data):
        data = data()
    return data if isinstance(data, dict) else {}


def post_chat(
    req: Any, *, use_case: Callable[[], ChatUseCase] = chat_use_case
) -> tuple[dict, int]:
    """Answer ``{"messages": [{"role", "content"}, ...]}``.

    Returns ``(body, status)``: ``{"reply", "meta"}`` with 200, ``{"error"}`` with 400
    for a missing or malformed message list, 500 for anything else.
    """
    try:
        raw = _payload(req).get("messages") or []
        messages = [ConversationTurn.from_mapping(m) for m in raw]
    except (AttributeError, TypeError, ValueError) as e:
        return {"error": f"Invalid messages: {e}"}, 400
    if not messages:
        return {"error": "Missing messages"}, 400

    try:
        out = use_case().respond(messages)
    except Exception as e:  # noqa: BLE001
        log.exception("/chat error")
        return {"error": str(e) or e.__class__.__name__}, 500
    return {"reply": out.reply, "meta": out.meta}, 200
