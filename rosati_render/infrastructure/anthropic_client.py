"""Anthropic Text Client - alternate vendor for /tidy prompt rewriting.

Invariants:
    - max_retries=0, no timeout override
    - All SDK failures mapped to ExternalServiceError(provider="anthropic")
    - Only text blocks contribute to the returned string
"""

import logging

import anthropic
from anthropic import APIError

from rosati_render.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)

PROVIDER = "anthropic"


class AnthropicTextClient:
    """TextCompleter backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-haiku-4-5",
        max_tokens: int = 1024,
        client: anthropic.AsyncAnthropic | None = None,
    ):
        self.client = client or anthropic.AsyncAnthropic(
            api_key=api_key, max_retries=0,
        )
        self.model = model
        self.max_tokens = max_tokens

    async def complete_text(self, system: str, prompt: str) -> str | None:
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIError as e:
            raise ExternalServiceError(e.message, PROVIDER) from e
        except anthropic.AnthropicError as e:
            raise ExternalServiceError(str(e), PROVIDER) from e
        except Exception as e:
            logger.error(f"Unexpected Anthropic error: {e}", exc_info=True)
            raise ExternalServiceError(str(e), PROVIDER) from e

        self._log_success(response)
        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
        return text or None

    def _log_success(self, response) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "Anthropic API success",
            extra={
                "provider": PROVIDER,
                "model": self.model,
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )
