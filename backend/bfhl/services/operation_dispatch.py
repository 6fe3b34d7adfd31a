"""Operation Dispatch: explicit routing from request key to operation handler.

Invariants:
    - Body must be an object with exactly one key, else 400 "Request must contain exactly one key"
    - Unknown key -> 400 "Invalid key" (checked before the value is looked at)
    - Every key->handler mapping is visible in one dict: no getattr magic
    - Operation validation errors -> 400 with their specific message
    - Any other exception (Gemini failure included) -> 500 "Internal Server Error";
      the real message is logged, never returned
    - Every outcome is an Envelope carrying the configured official_email

Design Decisions:
    - Dispatcher returns status + envelope; routes only serialize it
    - Handlers instantiated once per dispatcher with explicit dependencies
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from fastapi import status

from bfhl.config import Settings
from bfhl.core.client_protocols import TextGenerator
from bfhl.core.domain_types import OperationKey
from bfhl.core.errors import INTERNAL_SERVER_ERROR_MESSAGE, InvalidRequestError
from bfhl.core.validate_inputs import split_single_key
from bfhl.schemas.envelope import Envelope
from bfhl.services.handle_ai import AIHandlers
from bfhl.services.handle_math import MathHandlers

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class DispatchResult:
    """HTTP status plus envelope body for one request."""
    status_code: int
    body: dict[str, Any]

    @property
    def is_success(self) -> bool:
        return self.body["is_success"]


class OperationDispatch:
    """Routes request key -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, settings: Settings, generator: TextGenerator):
        self._official_email = settings.official_email
        math = MathHandlers()
        ai = AIHandlers(generator)

        # ADR: every mapping explicit: adding an operation requires editing this dict
        self._handlers: dict[OperationKey, Handler] = {
            OperationKey.FIBONACCI: math.fibonacci,
            OperationKey.PRIME: math.prime,
            OperationKey.LCM: math.lcm,
            OperationKey.HCF: math.hcf,
            OperationKey.AI: ai.answer,
        }

    @property
    def operations(self) -> frozenset[OperationKey]:
        return frozenset(self._handlers)

    async def dispatch(self, body: Any) -> DispatchResult:
        """Validate -> execute -> respond. Never raises."""
        operation: OperationKey | None = None
        try:
            operation, value = split_single_key(body)
            data = await self._handlers[operation](value)
        except InvalidRequestError as e:
            logger.warning(
                f"Rejected request: {e.message}",
                extra={"operation": e.operation, "error_code": e.code},
            )
            return self._failure(status.HTTP_400_BAD_REQUEST, e.public_message)
        except Exception as e:
            logger.error(
                f"Operation failed: {e}",
                extra={
                    "operation": operation.value if operation else None,
                    "error_code": getattr(e, "code", "INTERNAL_ERROR"),
                },
                exc_info=True,
            )
            return self._failure(
                status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE,
            )
        logger.info("Operation succeeded", extra={"operation": operation.value})
        return DispatchResult(
            status.HTTP_200_OK, Envelope.success(self._official_email, data),
        )

    def _failure(self, status_code: int, error: str) -> DispatchResult:
        return DispatchResult(status_code, Envelope.failure(self._official_email, error))
