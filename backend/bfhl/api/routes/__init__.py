"""Route Modules: one file per endpoint.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain operation logic (delegate to services/)
"""
