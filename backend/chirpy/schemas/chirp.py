"""Chirp Schemas — create/validate payloads and public chirp representation.

Invariants:
    - ChirpCreate.user_id stays a str: malformed ids must reach the handler
      so they map to InvalidIdentityError (400), not a validation failure
    - No max_length on body: the length check belongs to core.moderation
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ChirpCreate(BaseModel):
    """New chirp payload."""
    body: str
    user_id: str


class ChirpValidate(BaseModel):
    """Moderation-only payload."""
    body: str


class ChirpValidateResponse(BaseModel):
    cleaned_body: str


class ChirpResponse(BaseModel):
    """Chirp as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID
