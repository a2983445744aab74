"""Relay Schemas - typed request/response structs with a pure validate step.

Invariants:
    - prompt: strict str, 2-1000 chars, no stripping or sanitising
    - n: coerced to int from form text, 1-4, default 2
    - size: one of ImageSize, default 1536x1536
    - validate_* never raise: they return Valid(value) or Invalid(errors)

Design Decisions:
    - Tagged result over raising ValidationError: routes decide how to surface
      failures, and tests assert on field-level errors directly
    - Only absent fields take defaults; an empty string is validated like any other value
      (None is treated as absent for callers that pass it)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rosati_render.core.domain_types import (
    DEFAULT_IMAGE_COUNT,
    DEFAULT_IMAGE_SIZE,
    IMAGE_COUNT_MAX,
    IMAGE_COUNT_MIN,
    PROMPT_MAX_LENGTH,
    PROMPT_MIN_LENGTH,
    ImageSize,
)
from rosati_render.core.errors import RequestValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


# ─── Requests ────────────────────────────────────────────────────

class TidyRequest(BaseModel):
    """Body of POST /tidy."""
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(
        strict=True, min_length=PROMPT_MIN_LENGTH, max_length=PROMPT_MAX_LENGTH,
    )


class RenderRequest(BaseModel):
    """Text fields of the POST /render multipart form."""
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(
        strict=True, min_length=PROMPT_MIN_LENGTH, max_length=PROMPT_MAX_LENGTH,
    )
    n: int = Field(DEFAULT_IMAGE_COUNT, ge=IMAGE_COUNT_MIN, le=IMAGE_COUNT_MAX)
    size: ImageSize = DEFAULT_IMAGE_SIZE


# ─── Responses ───────────────────────────────────────────────────

class HealthResponse(BaseModel):
    ok: bool = True


class TidyResponse(BaseModel):
    prompt: str


class RenderResponse(BaseModel):
    images: list[str]


# ─── Validation results ──────────────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    value: ModelT


@dataclass(frozen=True)
class Invalid:
    errors: tuple[FieldError, ...]

    @property
    def message(self) -> str:
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)

    def to_error(self) -> RequestValidationFailed:
        return RequestValidationFailed(
            self.message, fields=[e.field for e in self.errors],
        )


ValidationResult = Union[Valid[ModelT], Invalid]


def _validate(model: type[ModelT], raw: Any) -> ValidationResult[ModelT]:
    try:
        return Valid(model.model_validate(raw))
    except ValidationError as exc:
        return Invalid(tuple(
            FieldError(
                field=".".join(str(loc) for loc in e["loc"]) or "body",
                message=e["msg"],
            )
            for e in exc.errors()
        ))


def validate_tidy(raw: Any) -> ValidationResult[TidyRequest]:
    """Check a decoded JSON body against TidyRequest."""
    return _validate(TidyRequest, raw)


def validate_render(fields: Mapping[str, Any]) -> ValidationResult[RenderRequest]:
    """Check /render form fields; None values count as absent."""
    present = {k: v for k, v in fields.items() if v is not None}
    return _validate(RenderRequest, present)


def require_valid(result: ValidationResult[ModelT]) -> ModelT:
    """Unwrap a Valid result or raise RequestValidationFailed."""
    if isinstance(result, Invalid):
        raise result.to_error()
    return result.value
