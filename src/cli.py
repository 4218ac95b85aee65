"""CLI for guess-scorer."""

import asyncio
import json
import logging

import click

from .mcp.server import timeout_from_env
from .scoring.pipeline import check_guess as run_check_guess
from .scoring.pipeline import score_guess as run_score_guess
from .vector.embedder import Embedder, model_from_env


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging verbosity",
)
def cli(log_level: str):
    """Guess Scorer - judge drawing guesses against prompts."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def _require_text(name: str, value: str) -> str:
    if not value.strip():
        raise click.UsageError(f"{name} is required")
    return value


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


@cli.command("check-guess")
@click.argument("guess", type=str)
@click.argument("prompt", type=str)
@click.option("--model", default=None, help="sentence-transformers model name")
@click.option(
    "--no-semantic",
    is_flag=True,
    default=False,
    help="Skip embeddings and score on lexical signals only",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for embeddings (default: EMBEDDING_TIMEOUT_SEC)",
)
def check_guess(
    guess: str, prompt: str, model: str | None, no_semantic: bool, timeout: float | None
):
    """Check whether GUESS names PROMPT."""
    _require_text("Guess", guess)
    _require_text("Prompt", prompt)

    embedder = None if no_semantic else Embedder(model or model_from_env())
    verdict = run_check_guess(
        guess,
        prompt,
        embedder=embedder,
        timeout=timeout if timeout is not None else timeout_from_env(),
    )
    _echo_json(verdict.to_dict())


@cli.command("score-guess")
@click.argument("guess", type=str)
@click.argument("answer", type=str)
@click.option(
    "--elapsed-ms",
    type=float,
    default=None,
    help="Time taken to guess in milliseconds (default: full round)",
)
@click.option("--human", is_flag=True, default=False, help="Guesser is a human")
@click.option("--model", default=None, help="sentence-transformers model name")
def score_guess(
    guess: str, answer: str, elapsed_ms: float | None, human: bool, model: str | None
):
    """Award points for GUESS against ANSWER."""
    _require_text("Guess", guess)
    _require_text("Answer", answer)

    result = run_score_guess(
        guess,
        answer,
        elapsed_ms=elapsed_ms,
        is_human=human,
        embedder=Embedder(model or model_from_env()),
        timeout=timeout_from_env(),
    )
    _echo_json(result)


@cli.command("mcp-server")
@click.option("--model", default=None, help="sentence-transformers model name")
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="MCP transport type",
)
def mcp_server(model: str | None, transport: str):
    """Run the Guess Scorer MCP server."""
    from .mcp.server import init_server, mcp

    init_server(model=model, embedding_timeout=timeout_from_env())

    click.echo(f"Starting MCP server ({transport} transport)...", err=True)

    if transport == "stdio":
        asyncio.run(mcp.run_stdio_async())
    else:
        asyncio.run(mcp.run_sse_async())


if __name__ == "__main__":
    cli()
