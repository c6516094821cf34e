"""Article → HTML pipeline package."""

from article_html.errors import (
    ConfigurationError,
    FetchError,
    PipelineError,
    TransformError,
    WriteError,
)
from article_html.fetcher import fetch_article
from article_html.models import PipelineResult, Stage
from article_html.pipeline import run_pipeline
from article_html.transformer import HtmlTransformer, build_prompt, strip_code_fences
from article_html.writer import save_html

__all__ = [
    "run_pipeline",
    "fetch_article",
    "HtmlTransformer",
    "build_prompt",
    "strip_code_fences",
    "save_html",
    "PipelineResult",
    "Stage",
    "PipelineError",
    "ConfigurationError",
    "FetchError",
    "TransformError",
    "WriteError",
]
