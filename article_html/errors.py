"""Error types raised by the pipeline stages.

Every stage wraps whatever went wrong in exactly one subclass of
:class:`PipelineError`.  The subclass identifies the failure kind, ``stage``
names where it happened and ``cause`` keeps the original exception so
callers can branch without parsing message text.
"""

from __future__ import annotations

from article_html.models import Stage


class PipelineError(Exception):
    """Base class for all pipeline failures."""

    stage: Stage
    prefix: str = "Pipeline error"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.detail = message
        self.cause = cause
        super().__init__(f"{self.prefix}: {message}")


class ConfigurationError(PipelineError):
    """A required setting (e.g. the API key) is missing or invalid."""

    stage = Stage.CONFIG
    prefix = "Configuration error"


class FetchError(PipelineError):
    stage = Stage.FETCH
    prefix = "Error while fetching article from URL"


class TransformError(PipelineError):
    stage = Stage.TRANSFORM
    prefix = "Error while communicating with OpenAI"


class WriteError(PipelineError):
    stage = Stage.WRITE
    prefix = "Error while writing file"
