from .knowledge_base_port import KnowledgeBaseLoaderPort
from .llm_port import LLMPort
from .topic_classifier_port import TopicClassifierPort

__all__ = [
    "KnowledgeBaseLoaderPort",
    "LLMPort",
    "TopicClassifierPort",
]
