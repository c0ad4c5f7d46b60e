"""ORM Models — SQLAlchemy declarative models for users and chirps.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from chirpy.models.user import User  # noqa: F401
from chirpy.models.chirp import Chirp  # noqa: F401
