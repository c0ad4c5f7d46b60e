"""User Routes — signup.

Invariants:
    - Undecodable bodies never reach the handler (RequestValidationError → 500)
    - Store failures, duplicate emails included, surface as 500
"""

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_user_repository
from chirpy.core.repository_protocols import UserRepository
from chirpy.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, users: UserRepository = Depends(get_user_repository),
):
    """Create a user from an email address."""
    user = await users.create_user(body.email)
    return UserResponse.model_validate(user)
