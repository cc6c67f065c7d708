from .json_kb_loader import JsonKnowledgeBaseLoader, parse_knowledge_base

__all__ = ["JsonKnowledgeBaseLoader", "parse_knowledge_base"]
