"""Boundary Protocols — contracts between the request handlers and the store.

Invariants:
    - Handlers depend on these Protocols, never on SQLAlchemy directly
    - get_chirp raises ResourceNotFoundError for unknown ids
    - Any other persistence failure surfaces as DatabaseError
    - Ids reaching the store are already parsed (UserId / ChirpId)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from chirpy.core.domain_types import UserId, ChirpId


class UserLike(Protocol):
    """Structural contract for persisted users."""
    id: UUID
    email: str
    created_at: datetime
    updated_at: datetime


class ChirpLike(Protocol):
    """Structural contract for persisted chirps."""
    id: UUID
    body: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create_user(self, email: str) -> UserLike: ...
    async def delete_all_users(self) -> int: ...


class ChirpRepository(Protocol):
    """Contract for chirp persistence."""
    async def create_chirp(self, body: str, user_id: UserId) -> ChirpLike: ...
    async def get_chirp(self, chirp_id: ChirpId) -> ChirpLike: ...
    async def list_chirps(self) -> list[ChirpLike]: ...
