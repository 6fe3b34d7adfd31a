"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Outbound failures mapped to GeminiAPIError (core/errors.py)
    - No retries on the delegated call
"""
