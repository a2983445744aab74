"""Domain Types - the fixed vocabulary of the relay: sizes, bounds, upload wrapper.

Invariants:
    - Prompt length is bounded 2-1000 characters for both routes
    - Image count n is bounded 1-4, default 2
    - ImageSize is exactly one of three square dimensions, default 1536x1536
    - ImageUpload always carries a content type (image/jpeg when none was declared)
"""

from dataclasses import dataclass
from enum import Enum


# ─── Bounds ──────────────────────────────────────────────────────

PROMPT_MIN_LENGTH = 2
PROMPT_MAX_LENGTH = 1000

IMAGE_COUNT_MIN = 1
IMAGE_COUNT_MAX = 4
DEFAULT_IMAGE_COUNT = 2

DEFAULT_MAX_UPLOAD_BYTES = 15 * 1024 * 1024  # 15 MiB


# ─── Uploads ─────────────────────────────────────────────────────

UPLOAD_FILENAME = "photo.jpg"
DEFAULT_IMAGE_CONTENT_TYPE = "image/jpeg"


# ─── Enums ───────────────────────────────────────────────────────

class ImageSize(str, Enum):
    """Output dimensions accepted by /render."""
    SMALL = "1024x1024"
    MEDIUM = "1536x1536"
    LARGE = "2048x2048"


DEFAULT_IMAGE_SIZE = ImageSize.MEDIUM


@dataclass(frozen=True)
class ImageUpload:
    """Uploaded photo, renamed and typed for the vendor edit call."""
    content: bytes
    content_type: str = DEFAULT_IMAGE_CONTENT_TYPE
    filename: str = UPLOAD_FILENAME

    @classmethod
    def from_bytes(cls, content: bytes, content_type: str | None) -> "ImageUpload":
        return cls(
            content=content,
            content_type=content_type or DEFAULT_IMAGE_CONTENT_TYPE,
        )

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def as_file_tuple(self) -> tuple[str, bytes, str]:
        """(filename, content, content_type) - the multipart file shape vendor SDKs accept."""
        return (self.filename, self.content, self.content_type)
