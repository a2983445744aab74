"""Route Modules - one file per endpoint.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain relay logic (delegate to services/)
"""
