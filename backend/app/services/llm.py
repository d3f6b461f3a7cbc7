from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI

from ..core.config import Settings
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert B2B technology content writer. Output Markdown. "
    "Do not invent stats, quotes, customers, awards, certifications."
)


def resolve_system_prompt(override: str | None) -> str:
    """
    Template-supplied system instruction, or the default when the override
    is absent or blank.
    """
    if override and override.strip():
        return override.strip()
    return DEFAULT_SYSTEM_PROMPT


def build_llm_client(settings: Settings) -> OpenAI | None:
    """
    Construct the OpenAI-compatible client used for generation.

    Returns None when OPENAI_API_KEY is unset; the generate endpoint then
    reports a configuration error on first use.
    """
    if not settings.OPENAI_API_KEY:
        return None

    kwargs: dict[str, Any] = {
        "api_key": settings.OPENAI_API_KEY.strip(),
        "timeout": settings.LLM_TIMEOUT_SECONDS,
        # No retries: failures surface to the caller immediately
        "max_retries": 0,
    }
    if settings.OPENAI_BASE_URL:
        kwargs["base_url"] = settings.OPENAI_BASE_URL.strip()
    return OpenAI(**kwargs)


class GenerationGateway:
    """
    Forwards one composed prompt to the model API and returns its text.

    Constructed once per process by the app factory and injected into
    requests, so tests can pass a fake client.
    """

    def __init__(self, client: Any, model: str) -> None:
        self.client = client
        self.model = model

    def generate(self, prompt: str, system_prompt: str | None = None) -> str:
        system = resolve_system_prompt(system_prompt)

        try:
            response = self.client.responses.create(
                model=self.model,
                input=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as e:
            logger.exception("Model API call failed: %s", e, extra={"step": "generate"})
            raise UpstreamError(str(e) or "Model API call failed") from e

        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.info(
                "Model call completed",
                extra={
                    "step": "generate",
                    "input_tokens": getattr(usage, "input_tokens", None),
                    "output_tokens": getattr(usage, "output_tokens", None),
                },
            )

        return getattr(response, "output_text", None) or ""


def build_generation_gateway(settings: Settings, client: Any = None) -> GenerationGateway | None:
    if not settings.OPENAI_API_KEY:
        return None
    if client is None:
        client = build_llm_client(settings)
    return GenerationGateway(client, settings.LLM_MODEL)
