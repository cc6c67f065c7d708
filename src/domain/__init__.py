"""Domain layer: pure types and logic (no I/O, no external libs).

Keep this layer free of side-effects. Define entities and small pure helpers only.
"""

from .aliases import DEFAULT_ALIASES, AliasTable, alias_boost
from .context import assemble_context
from .dialogue import ConversationTurn, DialoguePair, Role, build_dialogue_context
from .document import DocKind, Document
from .indexing import Corpus, build_corpus, split_sentences, split_tag
from .knowledge import Intent, KnowledgeBase
from .language import detect_arabic, reply_language
from .policy import Action, Decision, Thresholds, decide
from .retrieval import NO_MATCH, Match, RetrievalResult, merge_ranked, rank, retrieve
from .scoring import KIND_BIAS, ScoringWeights, jaccard, lev_similarity, levenshtein
from .text_norm import normalize, tokenize

__all__ = [
    "Intent",
    "KnowledgeBase",
    "DocKind",
    "Document",
    "Corpus",
    "build_corpus",
    "split_sentences",
    "split_tag",
    "normalize",
    "tokenize",
    "AliasTable",
    "DEFAULT_ALIASES",
    "alias_boost",
    "ScoringWeights",
    "KIND_BIAS",
    "jaccard",
    "levenshtein",
    "lev_similarity",
    "Match",
    "NO_MATCH",
    "RetrievalResult",
    "merge_ranked",
    "rank",
    "retrieve",
    "ConversationTurn",
    "DialoguePair",
    "Role",
    "build_dialogue_context",
    "assemble_context",
    "detect_arabic",
    "reply_language",
    "Action",
    "Decision",
    "Thresholds",
    "decide",
]
