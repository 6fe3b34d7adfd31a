"""Route Dependencies: wires Settings, the Gemini client and the dispatcher.

Invariants:
    - Settings come from get_settings() (one instance per process)
    - Tests replace get_text_generator via app.dependency_overrides
"""

from fastapi import Depends

from bfhl.config import Settings, get_settings
from bfhl.core.client_protocols import TextGenerator
from bfhl.infrastructure.gemini_client import GeminiClient
from bfhl.services.operation_dispatch import OperationDispatch


def get_text_generator(settings: Settings = Depends(get_settings)) -> TextGenerator:
    return GeminiClient.from_settings(settings)


def get_dispatch(
    settings: Settings = Depends(get_settings),
    generator: TextGenerator = Depends(get_text_generator),
) -> OperationDispatch:
    return OperationDispatch(settings, generator)
