"""Relay Backend - composes the configured text vendor with the image editor.

Invariants:
    - Image edits always go through OpenAI (the only wired image-edit vendor)
    - tidy_provider selects the text vendor: "openai" reuses the same client
"""

from rosati_render.config import Settings
from rosati_render.core.domain_types import ImageUpload
from rosati_render.core.relay_protocols import ImageEditor, RelayBackend, TextCompleter
from rosati_render.infrastructure.anthropic_client import AnthropicTextClient
from rosati_render.infrastructure.openai_client import OpenAIRelayClient


class CompositeRelayBackend:
    """RelayBackend delegating each capability to its own adapter."""

    def __init__(self, text: TextCompleter, images: ImageEditor):
        self.text = text
        self.images = images

    async def complete_text(self, system: str, prompt: str) -> str | None:
        return await self.text.complete_text(system, prompt)

    async def edit_image(
        self, upload: ImageUpload, prompt: str, n: int, size: str,
    ) -> list[str]:
        return await self.images.edit_image(upload, prompt, n, size)


def build_relay_backend(settings: Settings) -> RelayBackend:
    openai_client = OpenAIRelayClient(
        api_key=settings.openai_api_key,
        text_model=settings.tidy_model,
        image_model=settings.render_model,
    )
    text: TextCompleter = openai_client
    if settings.tidy_provider == "anthropic":
        text = AnthropicTextClient(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_tidy_model,
            max_tokens=settings.anthropic_max_tokens,
        )
    return CompositeRelayBackend(text=text, images=openai_client)
