"""User Schemas — signup request and public user representation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Signup payload."""
    email: str


class UserResponse(BaseModel):
    """User as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
