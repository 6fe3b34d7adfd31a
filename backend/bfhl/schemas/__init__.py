"""Pydantic Schemas: response envelope and upstream response shapes.

Invariants:
    - Schemas validate at system boundary (HTTP responses, Gemini payloads)
"""
