"""SQL Repositories — SQLAlchemy implementations of the store protocols.

Invariants:
    - Each repository works on the request's AsyncSession, committing per operation
    - SQLAlchemyError never escapes: rolled back and re-raised as DatabaseError
    - get_chirp raises ResourceNotFoundError when the id is unknown
    - list_chirps is ordered by created_at ascending
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.core.domain_types import ChirpId, UserId
from chirpy.core.errors import ResourceNotFoundError
from chirpy.infrastructure.database import translate_db_error
from chirpy.models.chirp import Chirp
from chirpy.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create_user(self, email: str) -> User:
        user = User(email=email)
        self._db.add(user)
        try:
            await self._db.commit()
            await self._db.refresh(user)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise translate_db_error(e, "create_user") from e
        logger.info(f"User created: {user.id}", extra={"user_id": str(user.id)})
        return user

    async def delete_all_users(self) -> int:
        """Delete every user (chirps cascade). Returns the number of users removed."""
        try:
            result = await self._db.execute(delete(User))
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise translate_db_error(e, "delete_all_users") from e
        return result.rowcount or 0


class SqlChirpRepository:
    """ChirpRepository backed by the chirps table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create_chirp(self, body: str, user_id: UserId) -> Chirp:
        chirp = Chirp(body=body, user_id=user_id)
        self._db.add(chirp)
        try:
            await self._db.commit()
            await self._db.refresh(chirp)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise translate_db_error(e, "create_chirp") from e
        logger.info(
            f"Chirp created: {chirp.id}",
            extra={"chirp_id": str(chirp.id), "user_id": str(user_id)},
        )
        return chirp

    async def get_chirp(self, chirp_id: ChirpId) -> Chirp:
        try:
            chirp = await self._db.get(Chirp, chirp_id)
        except SQLAlchemyError as e:
            raise translate_db_error(e, "get_chirp") from e
        if chirp is None:
            raise ResourceNotFoundError("Chirp", str(chirp_id))
        return chirp

    async def list_chirps(self) -> list[Chirp]:
        try:
            result = await self._db.execute(
                select(Chirp).order_by(Chirp.created_at.asc()),
            )
        except SQLAlchemyError as e:
            raise translate_db_error(e, "list_chirps") from e
        return list(result.scalars().all())
