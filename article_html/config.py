"""Centralised settings for the article → HTML pipeline.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_SOURCE_URL = (
    "https://cdn.oxido.pl/hr/Zadanie%20dla%20JJunior%20AI%20Developera%20-%20tresc%20artykulu.txt"
)


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Input / output
    # ------------------------------------------------------------------
    source_url: str = field(
        default_factory=lambda: os.environ.get("ARTICLE_SOURCE_URL", DEFAULT_SOURCE_URL)
    )
    output_path: Path = field(
        default_factory=lambda: Path(os.environ.get("ARTICLE_OUTPUT_PATH", "artykul.html"))
    )
    output_encoding: str = "utf-8"

    # ------------------------------------------------------------------
    # Chat-completion model
    # ------------------------------------------------------------------
    openai_api_key: str = field(
        default_factory=lambda: os.environ.get("OPENAI_API_KEY", "")
    )
    openai_base_url: str = field(
        default_factory=lambda: os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/v1")
    )
    chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4")
    )
    max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("OPENAI_MAX_TOKENS", "2048"))
    )
    temperature: float = field(
        default_factory=lambda: float(os.environ.get("OPENAI_TEMPERATURE", "0.7"))
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    # ``None`` means wait indefinitely, matching an unconfigured client.
    request_timeout: float | None = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    @property
    def completions_url(self) -> str:
        """Absolute URL of the chat-completion endpoint."""
        return f"{self.openai_base_url.rstrip('/')}/chat/completions"


# Module-level singleton used by the CLI:
#   from article_html.config import settings
settings = Settings()
