from __future__ import annotations

import re
import unicodedata

# Anything that is not a Unicode letter or digit (underscore counts as \w, so add it back)
_NON_ALNUM = re.compile(r"[\W_]+", re.UNICODE)
_WS = re.compile(r"\s+", re.UNICODE)


def normalize(text: str) -> str:
    """Canonical comparison form: NFKC, lower-case, letters/digits only, single spaces.

    Total over all input; ``normalize(normalize(x)) == normalize(x)``.
    """
    s = unicodedata.normalize("NFKC", text or "").lower()
    s = _NON_ALNUM.sub(" ", s)
    return _WS.sub(" ", s).strip()


def tokenize(text: str) -> list[str]:
    """Ordered tokens of the normalized text (duplicates kept)."""
    return [t for t in normalize(text).split(" ") if t]


def token_set(text: str) -> frozenset[str]:
    return frozenset(tokenize(text))


def padded(text: str) -> str:
    """Normalized text wrapped in single spaces for whole-word substring checks."""
    return f" {normalize(text)} "
