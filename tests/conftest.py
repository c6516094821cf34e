"""Shared fixtures for the article → HTML test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from article_html.config import Settings

SOURCE_URL = "https://example.com/article.txt"
BASE_URL = "https://llm.example.com/v1"
COMPLETIONS_URL = f"{BASE_URL}/chat/completions"


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Build explicit settings so tests never depend on the real environment."""
    values = {
        "source_url": SOURCE_URL,
        "output_path": tmp_path / "artykul.html",
        "openai_api_key": "sk-test",
        "openai_base_url": BASE_URL,
        "chat_model": "gpt-4",
        "max_tokens": 2048,
        "temperature": 0.7,
        "request_timeout": None,
    }
    values.update(overrides)
    return Settings(**values)


def completion(content: str) -> dict:
    """Minimal chat-completion response body with one choice."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)
