"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Request schemas only check shape (field present, right JSON type);
      domain rules (length, banned words, id format) run in the handlers
    - Response schemas read ORM objects via from_attributes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
