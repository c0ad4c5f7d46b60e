"""API Layer — FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All JSON errors use the {"error": "<message>"} envelope
"""
