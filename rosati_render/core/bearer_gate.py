"""Bearer Gate - compares the Authorization header against one configured token.

Invariants:
    - Only the literal "Bearer " prefix is recognised; anything else is no token
    - A plain equality check, no per-token identity, no expiry
    - The expected token is fixed at construction and never mutated
"""

from dataclasses import dataclass

from rosati_render.core.errors import AuthError

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class BearerConfig:
    expected_token: str


def extract_bearer_token(authorization: str | None) -> str:
    """Token after "Bearer ", or "" when the header is absent or malformed."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return ""


class BearerGate:
    """Request filter holding the expected credential."""

    def __init__(self, config: BearerConfig):
        self._expected = config.expected_token

    def is_authorized(self, authorization: str | None) -> bool:
        return extract_bearer_token(authorization) == self._expected

    def check(self, authorization: str | None) -> None:
        """Raise AuthError unless the header carries the expected token."""
        if not self.is_authorized(authorization):
            raise AuthError()
