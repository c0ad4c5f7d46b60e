"""Route Dependencies — per-request access to app-owned state and repositories.

Invariants:
    - Settings and HitCounter are read from app.state (set by create_app),
      never from module globals, so every app instance is isolated
    - Repositories wrap the request-scoped AsyncSession from get_db
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config import Settings
from chirpy.core.hit_counter import HitCounter
from chirpy.core.repository_protocols import ChirpRepository, UserRepository
from chirpy.infrastructure.database import get_db
from chirpy.infrastructure.repositories import SqlChirpRepository, SqlUserRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_chirp_repository(db: AsyncSession = Depends(get_db)) -> ChirpRepository:
    return SqlChirpRepository(db)
