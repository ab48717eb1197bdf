"""API Layer — FastAPI routes, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies (except 204 and OPTIONS, which have none)

Design Decisions:
    - Thin routes delegate to services
"""
