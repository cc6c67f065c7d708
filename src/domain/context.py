from __future__ import annotations

from collections.abc import Iterable

from src.domain.retrieval import Match


def assemble_context(matches: Iterable[Match], k: int | None = None) -> str:
    """Prompt-ready CONTEXT block, one Q/A pair per match.

    Format per match:
    Q: <matched text>\nA: <full response>
    """
    out: list[str] = []
    max_matches = float("inf") if k is None else int(k)
    for i, m in enumerate(matches, 1):
        if i > max_matches:
            break
        out.append(f"Q: {m.pattern}\nA: {m.response}")
    return "\n\n".join(out)
