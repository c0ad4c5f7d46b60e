"""Admin Routes — liveness probe, hit-count metrics page and dev-only reset.

Invariants:
    - GET /admin/healthz always returns 200 "OK" with no side effects
    - GET /admin/metrics renders the current hit count into METRICS_TEMPLATE
    - POST /admin/reset is rejected with 403 outside the dev platform,
      leaving the store and the counter untouched
    - In dev, reset deletes all users first and only then zeroes the counter;
      a store failure propagates (500) and the counter keeps its value
"""

import logging

from fastapi import APIRouter, Depends

from chirpy.api.dependencies import (
    get_app_settings, get_hit_counter, get_user_repository,
)
from chirpy.api.responses import html_response, text_response
from chirpy.config import Settings
from chirpy.core.errors import ForbiddenError
from chirpy.core.hit_counter import HitCounter
from chirpy.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_TEMPLATE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@router.get("/healthz")
async def healthz():
    return text_response("OK")


@router.get("/metrics")
async def metrics(counter: HitCounter = Depends(get_hit_counter)):
    """Render the admin page with the static file hit count."""
    return html_response(METRICS_TEMPLATE.format(hits=counter.value()))


@router.post("/reset")
async def reset(
    settings: Settings = Depends(get_app_settings),
    counter: HitCounter = Depends(get_hit_counter),
    users: UserRepository = Depends(get_user_repository),
):
    """Delete all users and zero the hit counter. Dev platform only."""
    if not settings.is_dev:
        raise ForbiddenError("Reset is only allowed in dev environment")

    deleted = await users.delete_all_users()
    hits = counter.value()
    counter.reset()
    logger.info(
        f"Reset: deleted {deleted} users, cleared {hits} hits",
        extra={"hits": hits},
    )
    return text_response("OK")
