from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

import requests

from nutrisnap.config import settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised for any failure talking to the completion provider."""


class CompletionClient:
    """
    Minimal client for an OpenAI-compatible /chat/completions endpoint.
    One non-streaming request per call, no retries.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str,
        base_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.model_name = model_name
        self.url = base_url.rstrip("/") + "/chat/completions"
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, messages: List[Dict[str, str]]) -> str:
        if not self.api_key:
            raise ProviderError("provider API key is not configured")

        try:
            response = self.session.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={"model": self.model_name, "messages": messages},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data: Any = response.json()
        except requests.HTTPError as exc:
            body = exc.response.text if exc.response is not None else ""
            raise ProviderError(f"provider returned an error: {exc}; body={body[:500]}") from exc
        except requests.RequestException as exc:
            raise ProviderError(f"provider request failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError("provider response is not JSON") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ProviderError("provider response has no completion text") from exc
        if not isinstance(content, str):
            raise ProviderError("provider completion text is not a string")
        return content


@lru_cache(maxsize=1)
def get_completion_client() -> CompletionClient:
    logger.info(
        "Completion client: model=%s url=%s key_set=%s",
        settings.model_name,
        settings.provider_base_url,
        bool(settings.groq_api_key),
    )
    return CompletionClient(
        api_key=settings.groq_api_key,
        model_name=settings.model_name,
        base_url=settings.provider_base_url,
        timeout=settings.provider_timeout,
    )
