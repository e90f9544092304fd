"""Model invocation through an OpenAI-compatible chat completions API."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from openai import OpenAI, OpenAIError

from balance_engine.config import Settings
from balance_engine.errors import ConfigError, UpstreamUnavailable

logger = logging.getLogger(__name__)


def make_model_invoker(settings: Settings, client: Optional[OpenAI] = None) -> Callable[[str], str]:
    """Build a ``prompt -> text`` callable bound to the configured model."""

    if client is None:
        if not settings.openai_api_key:
            raise ConfigError("OPENAI_API_KEY is not set")
        client = OpenAI(api_key=settings.openai_api_key, base_url=settings.openai_base_url)

    def invoke(prompt: str) -> str:
        try:
            resp = client.chat.completions.create(
                model=settings.model,
                max_tokens=settings.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as exc:
            logger.error("Model request to %s failed: %s", settings.model, exc)
            raise UpstreamUnavailable(f"Model request failed: {exc}") from exc

        content = resp.choices[0].message.content if resp and resp.choices else None
        if not content:
            raise UpstreamUnavailable("Model returned no content")
        return content

    return invoke
