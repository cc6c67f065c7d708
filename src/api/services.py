from __future__ import annotations

"""API services: configured, cached use-case instances.

Resolved lazily through the composition root so importing the routes does not
read the intents file.
"""

from src.application.use_cases import ChatUseCase  # noqa: E402
from src.config.configure_app import get_chat_use_case  # noqa: E402


def chat_use_case() -> ChatUseCase:
    return get_chat_use_case()


__all__ = ["chat_use_case"]
