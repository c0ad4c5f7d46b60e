"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no business logic: moderation lives in core/, persistence behind repositories
"""
