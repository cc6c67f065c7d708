from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DocKind(str, Enum):
    PATTERN = "pattern"
    RESPONSE = "response"
    TAG = "tag"


@dataclass(frozen=True)
class Document:
    """One comparable text unit derived from an intent.

    ``full_response`` is what gets surfaced when this document matches: the intent's
    first response for pattern/tag documents, the unsplit response for response sentences.
    """

    text: str
    tag: str
    kind: DocKind
    full_response: str = ""
