"""API Layer — FastAPI routes, auth boundary and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Authorization happens here and nowhere else

Design Decisions:
    - Thin routes delegate to services
"""
