"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

from article_html.config import DEFAULT_SOURCE_URL, Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "ARTICLE_SOURCE_URL",
        "ARTICLE_OUTPUT_PATH",
        "OPENAI_BASE_URL",
        "OPENAI_CHAT_MODEL",
        "OPENAI_MAX_TOKENS",
        "OPENAI_TEMPERATURE",
        "REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.source_url == DEFAULT_SOURCE_URL
    assert s.output_path == Path("artykul.html")
    assert s.chat_model == "gpt-4"
    assert s.max_tokens == 2048
    assert s.temperature == 0.7
    assert s.request_timeout is None
    assert s.output_encoding == "utf-8"
    assert s.completions_url == "https://api.openai.com/v1/chat/completions"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "100")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("ARTICLE_OUTPUT_PATH", "out/page.html")

    s = Settings()
    assert s.openai_api_key == "sk-env"
    assert s.chat_model == "gpt-4o-mini"
    assert s.max_tokens == 100
    assert s.temperature == 0.0
    assert s.request_timeout == 12.5
    assert s.output_path == Path("out/page.html")


def test_completions_url_tolerates_trailing_slash() -> None:
    s = Settings(openai_base_url="http://localhost:8080/v1/")
    assert s.completions_url == "http://localhost:8080/v1/chat/completions"
