from .corpus_cache import CorpusCache

__all__ = ["CorpusCache"]
