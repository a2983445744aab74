"""Boundary Protocols - the two vendor capabilities the relay depends on.

Invariants:
    - Core and services NEVER import a vendor SDK; they only see these Protocols
    - Implementations raise ExternalServiceError on any vendor failure

Design Decisions:
    - Protocol over ABC: fakes in tests need no inheritance
"""

from typing import Protocol

from rosati_render.core.domain_types import ImageUpload


class TextCompleter(Protocol):
    """Contract for system+user prompt completion."""
    async def complete_text(self, system: str, prompt: str) -> str | None: ...


class ImageEditor(Protocol):
    """Contract for editing a supplied base image per a text instruction."""
    async def edit_image(
        self, upload: ImageUpload, prompt: str, n: int, size: str,
    ) -> list[str]: ...


class RelayBackend(TextCompleter, ImageEditor, Protocol):
    """Both capabilities behind one object, as handed to the route layer."""
