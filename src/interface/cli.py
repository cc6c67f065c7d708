from __future__ import annotations

# ruff: noqa: E402, B008

"""Thin CLI that delegates to use-cases.

Commands:
- query: rank the knowledge base against a question
- context: show which earlier exchanges of a conversation are pulled into context
- chat: answer the last message of a conversation (answer / defer / refuse)
- corpus: knowledge-base and corpus statistics
"""

import json
import logging
import sys
from collections import Counter
from pathlib import Path

import typer

from src.application.use_cases import ChatUseCase, QueryUseCase
from src.config.composition import build_chat_use_case, build_query_use_case
from src.core.exceptions import ConfigurationError, KnowledgeBaseError
from src.core.logging_setup import setup_logging
from src.core.settings import Settings
from src.domain.dialogue import ConversationTurn, build_dialogue_context

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Intent KB tools")


def _settings(intents: Path | None) -> Settings:
    if intents is None:
        return Settings()
    return Settings(intents_path=intents)


def _build_query_use_case(intents: Path | None) -> QueryUseCase:
    return build_query_use_case(_settings(intents))


def _build_chat_use_case(intents: Path | None) -> ChatUseCase:
    return build_chat_use_case(_settings(intents))


def _load_conversation(path: Path) -> list[ConversationTurn]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"cannot read conversation file {path}: {e}") from e
    if isinstance(raw, dict):
        raw = raw.get("messages", [])
    try:
        return [ConversationTurn.from_mapping(m) for m in raw or []]
    except (AttributeError, ValueError) as e:
        raise ConfigurationError(f"invalid conversation file {path}: {e}") from e


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("query")
def query_cmd(
    text: str = typer.Argument(..., help="Question / query text"),
    k: int = typer.Option(0, "--top-k", help="Number of matches (0 = settings default)"),
    intents: Path | None = typer.Option(None, "--intents", help="Intents JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    setup_logging(logging.ERROR if as_json else logging.INFO)
    uc = _build_query_use_case(intents)
    result = uc.retrieve(text, k=(k or None))

    if as_json:
        _echo_json(
            {
                "best": {"tag": result.best.tag, "score": result.best.score},
                "globalRelatedness": result.global_relatedness,
                "top": [
                    {
                        "index": i,
                        "tag": m.tag,
                        "pattern": m.pattern,
                        "response": m.response,
                        "score": m.score,
                    }
                    for i, m in enumerate(result.top, 1)
                ],
            }
        )
        raise typer.Exit()

    typer.echo(f"global_relatedness={result.global_relatedness:.3f}")
    if not result.top:
        typer.echo("No matches.")
        return
    for i, m in enumerate(result.top, 1):
        typer.echo(f"[{i}] score={m.score:.3f}  {m.tag}")
        typer.echo("     " + m.pattern.strip().replace("\n", " "))


@app.command("context")
def context_cmd(
    conversation: Path = typer.Argument(..., help="JSON list of {role, content} prior turns"),
    latest: str = typer.Argument(..., help="The in-flight user message"),
) -> None:
    setup_logging(logging.WARNING)
    d = Settings().dialogue
    ctx = build_dialogue_context(
        _load_conversation(conversation),
        latest,
        max_back=d.max_back,
        threshold=d.sim_threshold,
        max_pairs=d.max_pairs,
    )
    typer.echo(ctx or "No related turns.")


@app.command("chat")
def chat_cmd(
    conversation: Path = typer.Argument(..., help="JSON list of {role, content}; last is answered"),
    intents: Path | None = typer.Option(None, "--intents", help="Intents JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print reply and meta as JSON"),
) -> None:
    setup_logging(logging.ERROR if as_json else logging.INFO)
    messages = _load_conversation(conversation)
    if not messages:
        raise ConfigurationError("conversation is empty")
    out = _build_chat_use_case(intents).respond(messages)
    if as_json:
        _echo_json({"reply": out.reply, "meta": out.meta})
        raise typer.Exit()
    typer.echo(out.reply)
    typer.echo("-" * 80)
    typer.echo(
        f"decision={out.decision.action.value} reason={out.decision.reason} "
        f"best={out.meta['bestScore']:.3f} related={out.meta['globalRelatedness']:.3f}"
    )


@app.command("corpus")
def corpus_cmd(
    intents: Path | None = typer.Option(None, "--intents", help="Intents JSON file"),
) -> None:
    setup_logging(logging.WARNING)
    uc = _build_query_use_case(intents)
    kb = uc.knowledge_base()
    corpus = uc.corpus()
    kinds = Counter(d.kind.value for d in corpus.documents)
    typer.echo(f"intents={len(kb.intents)} documents={len(corpus)}")
    typer.echo(
        f"patterns={kinds.get('pattern', 0)} response_sentences={kinds.get('response', 0)} "
        f"tag_segments={kinds.get('tag', 0)} vocabulary={len(corpus.vocabulary)}"
    )
    typer.echo(f"fingerprint={corpus.fingerprint}")


def main() -> int:
    try:
        app()
        return 0
    except (ConfigurationError, KnowledgeBaseError) as ce:
        typer.secho(f"Config error: {ce}", fg=typer.colors.RED)
        return 2
    except Exception as e:  # noqa: BLE001
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        return 1


if __name__ == "__main__":
    sys.exit(main())
