from __future__ import annotations

import re
from typing import Literal

Language = Literal["ar", "en"]

_ARABIC = re.compile(r"[\u0600-\u06FF]")


def detect_arabic(text: str) -> bool:
    return bool(_ARABIC.search(text or ""))


def reply_language(text: str) -> Language:
    return "ar" if detect_arabic(text) else "en"
