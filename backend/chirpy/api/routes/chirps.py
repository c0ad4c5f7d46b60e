"""Chirp Routes — create, list, fetch and moderate chirps.

Invariants:
    - Creation order: length check, banned-word filter, user_id parse, store call;
      a too-long body or malformed user_id fails before the store is touched
    - Malformed ids (body or path) → 400 InvalidIdentityError, never a crash
    - Unknown chirp id → 404; any other store failure → 500
    - GET /api/chirps lists in created_at ascending order
"""

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_chirp_repository
from chirpy.core.domain_types import parse_chirp_id, parse_user_id
from chirpy.core.moderation import moderate
from chirpy.core.repository_protocols import ChirpRepository
from chirpy.schemas.chirp import (
    ChirpCreate, ChirpResponse, ChirpValidate, ChirpValidateResponse,
)

router = APIRouter(prefix="/api", tags=["chirps"])


@router.post(
    "/chirps", response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_chirp(
    body: ChirpCreate, chirps: ChirpRepository = Depends(get_chirp_repository),
):
    """Moderate and store a new chirp."""
    cleaned = moderate(body.body)
    user_id = parse_user_id(body.user_id)
    chirp = await chirps.create_chirp(cleaned, user_id)
    return ChirpResponse.model_validate(chirp)


@router.get("/chirps", response_model=list[ChirpResponse])
async def list_chirps(chirps: ChirpRepository = Depends(get_chirp_repository)):
    return [ChirpResponse.model_validate(c) for c in await chirps.list_chirps()]


@router.get("/chirps/{chirp_id}", response_model=ChirpResponse)
async def get_chirp(
    chirp_id: str, chirps: ChirpRepository = Depends(get_chirp_repository),
):
    chirp = await chirps.get_chirp(parse_chirp_id(chirp_id))
    return ChirpResponse.model_validate(chirp)


@router.post("/validate_chirp", response_model=ChirpValidateResponse)
async def validate_chirp(body: ChirpValidate):
    """Run moderation without storing anything."""
    return ChirpValidateResponse(cleaned_body=moderate(body.body))
