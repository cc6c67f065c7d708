from .health import RegexHealthClassifier

__all__ = ["RegexHealthClassifier"]
