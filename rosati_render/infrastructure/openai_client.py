"""OpenAI Relay Client - wraps AsyncOpenAI for prompt rewriting and image edits.

Invariants:
    - max_retries=0: a failed call fails the request, it is never replayed
    - No timeout override; the SDK default applies
    - Every SDK failure mapped to ExternalServiceError(provider="openai")
    - edit_image uses images.edit with the uploaded photo as the base image

Design Decisions:
    - One client object serves both capabilities: same key, same connection pool
"""

import logging

import openai
from openai import AsyncOpenAI

from rosati_render.core.domain_types import ImageUpload
from rosati_render.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)

PROVIDER = "openai"


def _error_message(e: Exception) -> str:
    """APIError carries a clean .message; other SDK errors only have str()."""
    return getattr(e, "message", None) or str(e)


class OpenAIRelayClient:
    """TextCompleter + ImageEditor backed by the OpenAI API."""

    def __init__(
        self,
        api_key: str,
        text_model: str = "gpt-4.1-mini",
        image_model: str = "gpt-image-1",
        client: AsyncOpenAI | None = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key, max_retries=0)
        self.text_model = text_model
        self.image_model = image_model

    async def complete_text(self, system: str, prompt: str) -> str | None:
        """Responses API call with one system and one user message."""
        try:
            response = await self.client.responses.create(
                model=self.text_model,
                input=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.OpenAIError as e:
            raise ExternalServiceError(_error_message(e), PROVIDER) from e
        except Exception as e:
            logger.error(f"Unexpected OpenAI error: {e}", exc_info=True)
            raise ExternalServiceError(str(e), PROVIDER) from e

        logger.info(
            "OpenAI text completion success",
            extra={"provider": PROVIDER, "model": self.text_model},
        )
        return response.output_text

    async def edit_image(
        self, upload: ImageUpload, prompt: str, n: int, size: str,
    ) -> list[str]:
        """images.edit on the uploaded photo; returns base64 payloads in order."""
        try:
            response = await self.client.images.edit(
                model=self.image_model,
                image=upload.as_file_tuple(),
                prompt=prompt,
                n=n,
                size=size,
            )
        except openai.OpenAIError as e:
            raise ExternalServiceError(_error_message(e), PROVIDER) from e
        except Exception as e:
            logger.error(f"Unexpected OpenAI error: {e}", exc_info=True)
            raise ExternalServiceError(str(e), PROVIDER) from e

        images = [d.b64_json for d in (response.data or []) if d.b64_json]
        logger.info(
            "OpenAI image edit success",
            extra={
                "provider": PROVIDER, "model": self.image_model,
                "image_count": len(images),
            },
        )
        return images
