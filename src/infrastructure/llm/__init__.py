from .providers import DummyLLM, OpenAIChatLLM

__all__ = ["DummyLLM", "OpenAIChatLLM"]
