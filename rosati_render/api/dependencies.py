"""Request Dependencies - bearer check, upload reader, backend lookup.

Invariants:
    - require_bearer is declared first on protected routes, so an unauthenticated
      request is never size-checked or field-validated (FastAPI still parses the
      body before dependencies run, so malformed JSON or multipart is a 400)
    - read_image_upload rejects an oversized file before the route body runs
    - Per-process objects live on app.state (set once by create_app)
"""

from typing import Any

from fastapi import File, Header, Request, UploadFile

from rosati_render.core.domain_types import ImageUpload
from rosati_render.core.errors import UploadTooLargeError
from rosati_render.core.relay_protocols import RelayBackend


async def require_bearer(
    request: Request, authorization: str | None = Header(None),
) -> None:
    request.app.state.bearer_gate.check(authorization)


RENDER_TEXT_FIELDS = ("prompt", "n", "size")


async def read_render_fields(request: Request) -> dict[str, Any]:
    """Text fields of the /render form as sent; empty strings are kept."""
    form = await request.form()
    return {name: form[name] for name in RENDER_TEXT_FIELDS if name in form}


def get_relay_backend(request: Request) -> RelayBackend:
    return request.app.state.relay_backend


async def read_image_upload(
    request: Request, image: UploadFile | None = File(None),
) -> ImageUpload | None:
    """Buffer the single image part, bounded by settings.max_upload_bytes."""
    if image is None:
        return None
    limit = request.app.state.settings.max_upload_bytes
    content = await image.read(limit + 1)
    if len(content) > limit:
        raise UploadTooLargeError(limit)
    return ImageUpload.from_bytes(content, image.content_type)
