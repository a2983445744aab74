"""Tidy Handler - rewrites free-form user text into a window-only edit instruction.

Invariants:
    - Prompt validated before the vendor is called
    - Missing, empty or whitespace-only vendor text is replaced by TIDY_FALLBACK_PROMPT
    - Any other vendor text is returned exactly as sent
    - Vendor failures are logged as tidy_failed and re-raised unchanged
"""

import logging
from typing import Any

from rosati_render.core.errors import ExternalServiceError
from rosati_render.core.relay_protocols import TextCompleter
from rosati_render.schemas.relay import TidyResponse, require_valid, validate_tidy

logger = logging.getLogger(__name__)

TIDY_SYSTEM_PROMPT = " ".join([
    "You rewrite prompts for an image-edit model.",
    "Only allow changes to WINDOW frames, sashes, muntins/grids, and glass.",
    "Do not alter siding, brick, trim, doors, roof, sky, landscaping.",
    "Preserve perspective, lighting, and natural reflections in glass.",
    "Keep it concise and concrete.",
])

TIDY_FALLBACK_PROMPT = "Replace only windows with specified style and color."


class TidyHandler:
    """POST /tidy."""

    def __init__(self, completer: TextCompleter):
        self.completer = completer

    async def tidy(self, raw_body: Any) -> TidyResponse:
        request = require_valid(validate_tidy(raw_body))
        try:
            text = await self.completer.complete_text(
                TIDY_SYSTEM_PROMPT, request.prompt,
            )
        except ExternalServiceError as exc:
            logger.error(
                "tidy_failed",
                extra={"error_code": exc.code, "provider": exc.provider},
                exc_info=True,
            )
            raise
        if not text or not text.strip():
            return TidyResponse(prompt=TIDY_FALLBACK_PROMPT)
        return TidyResponse(prompt=text)
