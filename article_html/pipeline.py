"""High-level runner for the article → HTML pipeline.

``run_pipeline`` is the single public function in this module.  It runs the
three stages strictly in order::

    fetch_article  →  HtmlTransformer.generate_html  →  save_html

and prints a progress line before and after each one so the CLI shows live
progress.  A stage failure stops the run; the caller receives a
:class:`~article_html.models.PipelineResult` instead of an exception and
decides how to report it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from article_html.config import Settings
from article_html.errors import PipelineError
from article_html.fetcher import fetch_article
from article_html.models import PipelineResult
from article_html.transformer import HtmlTransformer
from article_html.writer import save_html

FetchFn = Callable[..., str]
WriteFn = Callable[..., Path]


def run_pipeline(
    settings: Settings,
    *,
    fetch: FetchFn = fetch_article,
    transformer_factory: Callable[[Settings], HtmlTransformer] = HtmlTransformer,
    write: WriteFn = save_html,
) -> PipelineResult:
    """Fetch the article at ``settings.source_url``, convert it, save it.

    Args:
        settings: Source URL, output path, model parameters and API key.
        fetch: Stage 1 callable ``(url, timeout=...) -> str``.
        transformer_factory: Builds the stage 2 transformer from *settings*.
        write: Stage 3 callable ``(content, path, encoding=...) -> Path``.

    Returns:
        A successful result carrying the written path and HTML, or a failed
        one carrying the :class:`~article_html.errors.PipelineError`.
    """
    try:
        # The transformer validates the API key, so build it before any
        # request is made.
        transformer = transformer_factory(settings)

        print(f"[fetch] Fetching article from {settings.source_url} …")
        article_text = fetch(settings.source_url, timeout=settings.request_timeout)
        print(f"[fetch] Article fetched ({len(article_text)} characters).")

        print(f"[transform] Generating HTML with {settings.chat_model} …")
        html = transformer.generate_html(article_text)
        print("[transform] HTML generated.")

        print(f"[write] Saving HTML to {settings.output_path} …")
        path = write(html, settings.output_path, encoding=settings.output_encoding)
        print(f"[write] File {path} saved.")
    except PipelineError as exc:
        print(f"[{exc.stage.value}] {exc}")
        return PipelineResult(ok=False, error=exc)

    return PipelineResult(ok=True, output_path=path, html=html)
