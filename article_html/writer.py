"""Persist generated HTML to disk."""

from __future__ import annotations

from pathlib import Path

from article_html.errors import WriteError


def save_html(content: str, path: str | Path, encoding: str = "utf-8") -> Path:
    """Write *content* to *path* byte-for-byte, replacing any existing file.

    The text is encoded before the file is opened, so content that cannot be
    encoded leaves an existing file untouched.  Newlines are not translated.

    Returns:
        The path that was written.

    Raises:
        WriteError: If the content cannot be encoded or the file cannot be
            written (missing directory, permissions, full disk, ...).
    """
    target = Path(path)
    try:
        data = content.encode(encoding)
        target.write_bytes(data)
    except (OSError, UnicodeError) as exc:
        raise WriteError(str(exc), cause=exc) from exc
    return target
