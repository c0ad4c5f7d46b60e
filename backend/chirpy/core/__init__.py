"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Moderation functions are pure and deterministic
"""
