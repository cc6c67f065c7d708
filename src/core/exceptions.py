from __future__ import annotations


class ConfigurationError(Exception):
    """Raised for invalid or missing configuration."""


class KnowledgeBaseError(Exception):
    """Raised when the intents file cannot be read or does not match the schema."""
