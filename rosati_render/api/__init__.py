"""API Layer - FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response body is {"error": <message>}
"""
