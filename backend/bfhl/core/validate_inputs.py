"""Input Validation: pure shape checks for the request body and each operation.

Invariants:
    - Every check either returns a normalized value or raises InvalidRequestError
    - Error messages are the exact public strings returned to callers
    - prime never rejects elements: non-integers are dropped, not reported
    - lcm/hcf reject empty arrays and any non-integer element
    - Integral floats (5.0) are normalized to int; bools are never integers
"""

from typing import Any

from bfhl.core.domain_types import OperationKey, as_int, is_json_integer
from bfhl.core.errors import InvalidRequestError

EXACTLY_ONE_KEY_MESSAGE = "Request must contain exactly one key"
INVALID_KEY_MESSAGE = "Invalid key"
INVALID_FIBONACCI_MESSAGE = "Invalid fibonacci input"
INVALID_PRIME_MESSAGE = "Invalid prime array input"
INVALID_LCM_MESSAGE = "Invalid lcm array input"
INVALID_HCF_MESSAGE = "Invalid hcf array input"
INVALID_AI_MESSAGE = "AI expects a non-empty string"


def split_single_key(body: Any) -> tuple[OperationKey, Any]:
    """Return (operation, value) for a body with exactly one known key."""
    if not isinstance(body, dict) or len(body) != 1:
        raise InvalidRequestError(EXACTLY_ONE_KEY_MESSAGE)
    ((key, value),) = body.items()
    try:
        operation = OperationKey(key)
    except ValueError:
        raise InvalidRequestError(INVALID_KEY_MESSAGE) from None
    return operation, value


def validate_fibonacci(value: Any) -> int:
    if not is_json_integer(value) or value < 0:
        raise InvalidRequestError(INVALID_FIBONACCI_MESSAGE, OperationKey.FIBONACCI.value)
    return as_int(value)


def validate_prime(value: Any) -> list[int]:
    """Array check only; non-integer elements are silently excluded."""
    if not isinstance(value, list):
        raise InvalidRequestError(INVALID_PRIME_MESSAGE, OperationKey.PRIME.value)
    return [as_int(v) for v in value if is_json_integer(v)]


def validate_integer_array(value: Any, operation: OperationKey) -> list[int]:
    """Non-empty list of integers, for lcm and hcf."""
    message = INVALID_LCM_MESSAGE if operation is OperationKey.LCM else INVALID_HCF_MESSAGE
    if not isinstance(value, list) or not value:
        raise InvalidRequestError(message, operation.value)
    if not all(is_json_integer(v) for v in value):
        raise InvalidRequestError(message, operation.value)
    return [as_int(v) for v in value]


def validate_question(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(INVALID_AI_MESSAGE, OperationKey.AI.value)
    return value
