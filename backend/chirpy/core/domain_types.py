"""Domain Types — identity types and the parser that produces them.

Invariants:
    - UserId and ChirpId wrap UUIDs; raw strings from clients go through parse_identity
    - parse_identity never raises anything but InvalidIdentityError
"""

from typing import NewType
from uuid import UUID

from chirpy.core.errors import InvalidIdentityError


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ChirpId = NewType("ChirpId", UUID)


def parse_identity(raw: str, field: str) -> UUID:
    """Parse a client-supplied id, raising InvalidIdentityError if malformed."""
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentityError(field, str(raw))


def parse_user_id(raw: str) -> UserId:
    return UserId(parse_identity(raw, "user_id"))


def parse_chirp_id(raw: str) -> ChirpId:
    return ChirpId(parse_identity(raw, "chirp_id"))
