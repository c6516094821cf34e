"""article-html CLI — entry-point for the article → HTML pipeline.

Usage:
    python cli/main.py --help

Commands:
    run     → fetch the article, convert it with the model, write the file
    prompt  → fetch the article and print the prompt that would be sent
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from article_html.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from article_html.config import settings
from article_html.errors import FetchError
from article_html.fetcher import fetch_article
from article_html.pipeline import run_pipeline
from article_html.transformer import SYSTEM_PROMPT, build_prompt

app = typer.Typer(
    name="article-html",
    help="Convert a plain-text article into semantic HTML with an LLM.",
    no_args_is_help=True,
)


@app.command("run")
def run(
    url: Optional[str] = typer.Option(None, help="Article URL (default: ARTICLE_SOURCE_URL)."),
    output: Optional[Path] = typer.Option(None, help="Output file (default: ARTICLE_OUTPUT_PATH)."),
    model: Optional[str] = typer.Option(None, help="Chat model (default: OPENAI_CHAT_MODEL)."),
    max_tokens: Optional[int] = typer.Option(None, help="Maximum completion tokens."),
    temperature: Optional[float] = typer.Option(None, help="Sampling temperature."),
) -> None:
    """Fetch the article, generate HTML and save it to a file."""
    overrides = {
        "source_url": url,
        "output_path": output,
        "chat_model": model,
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
    run_settings = replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )

    result = run_pipeline(run_settings)
    if not result.ok:
        typer.echo(f"[run] Failed at stage {result.stage.value!r}: {result.error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[run] Done: {result.output_path}")


@app.command("prompt")
def prompt(
    url: Optional[str] = typer.Option(None, help="Article URL (default: ARTICLE_SOURCE_URL)."),
) -> None:
    """Print the system and user prompt for the article without calling the model."""
    source_url = url or settings.source_url
    try:
        article_text = fetch_article(source_url, timeout=settings.request_timeout)
    except FetchError as exc:
        typer.echo(f"[prompt] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[system] {SYSTEM_PROMPT}")
    typer.echo("")
    typer.echo(build_prompt(article_text))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
