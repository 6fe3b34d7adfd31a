"""Boundary Protocols: contracts between services and outbound clients.

Invariants:
    - Services depend on the Protocol, never on GeminiClient directly
    - Implementations raise GeminiAPIError (or any exception) on failure;
      the dispatcher maps anything unexpected to a 500
"""

from typing import Protocol


class TextGenerator(Protocol):
    """Anything that turns a prompt into completion text."""
    async def generate_text(self, prompt: str) -> str: ...
