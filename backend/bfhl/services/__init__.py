"""Services Layer: operation handlers and the operation dispatcher.

Invariants:
    - Dispatch uses an explicit dict mapping (no auto-discovery)
"""
