"""Render Handler - edits the uploaded photo per the prompt via the image vendor.

Invariants:
    - Form fields validated first, then the image presence check
    - The vendor is asked for an edit of the supplied image, never a fresh generation
    - At most n images are returned, in vendor order
    - Vendor failures are logged as render_failed and re-raised unchanged
"""

import logging
from collections.abc import Mapping
from typing import Any

from rosati_render.core.domain_types import ImageUpload
from rosati_render.core.errors import ExternalServiceError, MissingFileError
from rosati_render.core.relay_protocols import ImageEditor
from rosati_render.schemas.relay import RenderResponse, require_valid, validate_render

logger = logging.getLogger(__name__)


class RenderHandler:
    """POST /render."""

    def __init__(self, editor: ImageEditor):
        self.editor = editor

    async def render(
        self, fields: Mapping[str, Any], upload: ImageUpload | None,
    ) -> RenderResponse:
        request = require_valid(validate_render(fields))
        if upload is None:
            raise MissingFileError()

        logger.info(
            "incoming_upload",
            extra={
                "mimetype": upload.content_type,
                "upload_bytes": upload.size_bytes,
                "prompt": request.prompt,
                "n": request.n,
                "size": request.size.value,
            },
        )

        try:
            images = await self.editor.edit_image(
                upload, request.prompt, request.n, request.size.value,
            )
        except ExternalServiceError as exc:
            logger.error(
                "render_failed",
                extra={"error_code": exc.code, "provider": exc.provider},
                exc_info=True,
            )
            raise
        return RenderResponse(images=images[:request.n])
