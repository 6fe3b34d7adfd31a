"""BFHL Application Package: multiplexed arithmetic and AI lookup service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
