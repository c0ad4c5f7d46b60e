"""Chirpy — users, chirps, content moderation and an admin hit counter over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
