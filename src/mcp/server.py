"""Guess Scorer MCP Server.

Exposes guess correctness checks and point scoring as MCP tools.
Used by game backends that want a scoring judge over stdio.
"""

import os

from mcp.server.fastmcp import FastMCP

from ..scoring.pipeline import check_guess as run_check_guess
from ..scoring.pipeline import score_guess as run_score_guess
from ..vector.embedder import Embedder

mcp = FastMCP(
    "Guess Scorer",
    instructions="""
Scores free-text guesses against drawing prompts.

Use check_guess to decide whether a guess names the prompt (exact, word match,
or combined lexical + semantic score).
Use score_guess to award points from semantic closeness, elapsed time and
whether the guesser is human.
""",
)

embedder: Embedder | None = None
timeout: float | None = None


def init_server(model: str | None = None, embedding_timeout: float | None = None):
    """Initialize server with the embedding model."""
    global embedder, timeout
    embedder = Embedder(model)
    timeout = embedding_timeout


def _require_embedder() -> Embedder:
    """Get embedder or raise error."""
    if embedder is None:
        raise RuntimeError("Server not initialized. Call init_server() first.")
    return embedder


def _missing(**fields: object) -> str | None:
    for name, value in fields.items():
        if not isinstance(value, str) or not value.strip():
            return f"{name.capitalize()} is required"
    return None


@mcp.tool()
def check_guess(guess: str, prompt: str, include_debug: bool = False) -> dict:
    """Check whether a guess matches a drawing prompt.

    Args:
        guess: Free-text guess
        prompt: Target prompt the drawing was made from
        include_debug: Include tokens and per-signal breakdown

    Returns:
        Dict with success, is_correct, similarity (0-1), method
    """
    error = _missing(guess=guess, prompt=prompt)
    if error:
        return {"success": False, "error": error}

    verdict = run_check_guess(
        guess, prompt, embedder=_require_embedder(), timeout=timeout
    )
    return {"success": True, **verdict.to_dict(include_debug=include_debug)}


@mcp.tool()
def score_guess(
    guess: str,
    answer: str,
    elapsed_ms: float | None = None,
    is_human: bool = False,
) -> dict:
    """Award points for a guess.

    Args:
        guess: Free-text guess
        answer: Correct answer
        elapsed_ms: Time taken to guess in milliseconds (default: full round)
        is_human: Whether the guesser is a human (1.5x multiplier)

    Returns:
        Dict with success, semantic_score, base_score, time_bonus,
        multiplier, final_score
    """
    error = _missing(guess=guess, answer=answer)
    if error:
        return {"success": False, "error": error}

    result = run_score_guess(
        guess,
        answer,
        elapsed_ms=elapsed_ms,
        is_human=is_human,
        embedder=_require_embedder(),
        timeout=timeout,
    )
    return {"success": True, **result}


def timeout_from_env() -> float | None:
    raw = os.environ.get("EMBEDDING_TIMEOUT_SEC")
    if not raw:
        return None
    return float(raw)


def main():
    """Run the MCP server (stdio transport)."""
    import asyncio

    init_server(embedding_timeout=timeout_from_env())

    asyncio.run(mcp.run_stdio_async())


if __name__ == "__main__":
    main()
