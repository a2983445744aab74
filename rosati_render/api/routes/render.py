"""Render Route - POST /render, multipart photo + prompt in, base64 images out.

Invariants:
    - Single file field "image"; text fields prompt, n, size
    - Text fields reach the validator exactly as sent; only absent fields are omitted
"""

from typing import Any

from fastapi import APIRouter, Depends

from rosati_render.api.dependencies import (
    get_relay_backend, read_image_upload, read_render_fields, require_bearer,
)
from rosati_render.core.domain_types import ImageUpload
from rosati_render.core.relay_protocols import RelayBackend
from rosati_render.schemas.relay import RenderResponse
from rosati_render.services.handle_render import RenderHandler

router = APIRouter(tags=["relay"])


@router.post(
    "/render", response_model=RenderResponse,
    dependencies=[Depends(require_bearer)],
)
async def render(
    fields: dict[str, Any] = Depends(read_render_fields),
    upload: ImageUpload | None = Depends(read_image_upload),
    backend: RelayBackend = Depends(get_relay_backend),
):
    """Edit the uploaded photo per the prompt."""
    return await RenderHandler(backend).render(fields, upload)
