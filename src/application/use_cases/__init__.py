from .chat import ChatReply, ChatUseCase
from .query_kb import DialogueConfig, QueryUseCase

__all__ = [
    "ChatReply",
    "ChatUseCase",
    "DialogueConfig",
    "QueryUseCase",
]
