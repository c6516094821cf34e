"""HTTP fetcher for the source article."""

from __future__ import annotations

import httpx

from article_html.errors import FetchError

_DEFAULT_HEADERS = {
    "User-Agent": "article-html/1.0",
}


def fetch_article(url: str, timeout: float | None = None) -> str:
    """Fetch *url* and return the response body as text.

    No size limit is enforced.  ``timeout=None`` waits for the server
    indefinitely.

    Raises:
        FetchError: On any transport failure or a 4xx/5xx status code.
    """
    try:
        with httpx.Client(
            headers=_DEFAULT_HEADERS,
            timeout=timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.HTTPError as exc:
        raise FetchError(str(exc), cause=exc) from exc
