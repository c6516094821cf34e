"""Article → HTML conversion via an OpenAI-compatible chat-completion API.

Request shape
-------------
One ``POST {OPENAI_BASE_URL}/chat/completions`` per article::

    {
      "model": "gpt-4",
      "messages": [{"role": "system", ...}, {"role": "user", ...}],
      "max_tokens": 2048,
      "temperature": 0.7
    }

The article is embedded verbatim in the user message.  Nothing is truncated
or chunked, so a very long article can exceed the model's context window and
be rejected server-side.

The model is asked for bare HTML but frequently wraps its answer in a
Markdown ```` ```html ```` fence anyway; :func:`strip_code_fences` removes it.
"""

from __future__ import annotations

import re
from typing import Any

import httpx

from article_html.config import Settings
from article_html.errors import ConfigurationError, TransformError

SYSTEM_PROMPT = (
    "You are an assistant that converts articles into clean HTML "
    "following the given guidelines."
)

_PROMPT_HEADER = """\
Convert the article below into clean HTML following these guidelines:
1. Use appropriate HTML tags to structure the content (e.g. <h1>, <h2>, <p>).
2. Mark the places where an image would fit with an <img> tag whose src attribute is "image_placeholder.jpg".
3. Give every image an alt attribute containing an exact prompt that can be used to generate the graphic.
4. Add a caption under each image using a <figcaption> tag.
5. Do not use any CSS or JavaScript. Return only the content to be inserted, without <html>, <head> or <body> tags.
6. Make sure to insert images **several times** at suitable places in the article.
7. Write the headings, alt attributes and captions in the same language as the article.

Article:
"""

_PROMPT_FOOTER = """

**Note:** Return only clean HTML code, without any extra markers, comments or Markdown formatting.
"""

_LEADING_FENCE = re.compile(r"^```html\s*")
_TRAILING_FENCE = re.compile(r"```\s*\Z")


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def build_prompt(article_text: str) -> str:
    """Return the user prompt with *article_text* embedded unmodified."""
    return _PROMPT_HEADER + article_text + _PROMPT_FOOTER


def strip_code_fences(text: str) -> str:
    """Remove a leading ```` ```html ```` and a trailing ```` ``` ```` marker.

    Only markers at the very start and end of the (trimmed) string are
    touched; fences inside the document are left alone.
    """
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


# ---------------------------------------------------------------------------
# Transformer
# ---------------------------------------------------------------------------

class HtmlTransformer:
    """Turns article text into an HTML fragment with a single completion call.

    Raises:
        ConfigurationError: From the constructor when no API key is set, so a
            run fails before any request leaves the process.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.openai_api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY is not set. Add it to your environment or .env file."
            )
        self.settings = settings

    def build_payload(self, article_text: str) -> dict[str, Any]:
        """Return the JSON body for the chat-completion request."""
        return {
            "model": self.settings.chat_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(article_text)},
            ],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
        }

    def generate_html(self, article_text: str) -> str:
        """Return the model's HTML rendition of *article_text*.

        Raises:
            TransformError: On any HTTP failure, an unparseable response, or
                an empty ``choices`` list.
        """
        url = self.settings.completions_url
        try:
            with httpx.Client(timeout=self.settings.request_timeout) as client:
                response = client.post(
                    url,
                    headers={
                        "Authorization": f"Bearer {self.settings.openai_api_key}",
                        "Content-Type": "application/json",
                    },
                    json=self.build_payload(article_text),
                )
                response.raise_for_status()
                data = response.json()

            choices = data.get("choices") or []
            if not choices:
                raise TransformError("No response from OpenAI")
            html = strip_code_fences(choices[0]["message"]["content"])
        except TransformError as exc:
            print(f"[transform] Error: {exc.detail}")
            raise
        except httpx.HTTPStatusError as exc:
            print(f"[transform] Server responded with status {exc.response.status_code}")
            print(f"[transform] Response body: {exc.response.text}")
            raise TransformError(str(exc), cause=exc) from exc
        except httpx.RequestError as exc:
            print(f"[transform] No response from server at {url}: {exc!r}")
            raise TransformError(str(exc), cause=exc) from exc
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            print(f"[transform] Error: {exc}")
            raise TransformError(f"malformed completion response ({exc})", cause=exc) from exc

        return html
