"""Tidy Route - POST /tidy, JSON in, rewritten prompt out."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from rosati_render.api.dependencies import get_relay_backend, require_bearer
from rosati_render.core.relay_protocols import RelayBackend
from rosati_render.schemas.relay import TidyResponse
from rosati_render.services.handle_tidy import TidyHandler

router = APIRouter(tags=["relay"])


@router.post(
    "/tidy", response_model=TidyResponse,
    dependencies=[Depends(require_bearer)],
)
async def tidy(
    payload: Any = Body(None),
    backend: RelayBackend = Depends(get_relay_backend),
):
    """Rewrite a free-form request into a window-only edit instruction."""
    return await TidyHandler(backend).tidy(payload)
