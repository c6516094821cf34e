"""Plain data types passed between the pipeline and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from article_html.errors import PipelineError


class Stage(str, Enum):
    CONFIG = "config"
    FETCH = "fetch"
    TRANSFORM = "transform"
    WRITE = "write"


@dataclass
class PipelineResult:
    """Outcome of a single :func:`~article_html.pipeline.run_pipeline` call."""

    ok: bool
    output_path: Path | None = None
    html: str = ""
    error: PipelineError | None = None

    @property
    def stage(self) -> Stage | None:
        """The stage that failed, or ``None`` for a successful run."""
        return self.error.stage if self.error is not None else None
