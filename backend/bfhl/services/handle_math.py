"""Math Handlers: fibonacci, prime, lcm, hcf (4 methods).

Invariants:
    - All methods follow impureim sandwich: validate (pure) -> compute (pure)
    - Validation failures raise InvalidRequestError with the public message
    - Handlers never touch the network
"""

from typing import Any

from bfhl.core.arithmetic import fibonacci, filter_primes, hcf, lcm
from bfhl.core.domain_types import OperationKey
from bfhl.core.validate_inputs import (
    validate_fibonacci,
    validate_integer_array,
    validate_prime,
)


class MathHandlers:
    """Pure arithmetic operations."""

    async def fibonacci(self, value: Any) -> list[int]:
        return fibonacci(validate_fibonacci(value))

    async def prime(self, value: Any) -> list[int]:
        return filter_primes(validate_prime(value))

    async def lcm(self, value: Any) -> int:
        return lcm(validate_integer_array(value, OperationKey.LCM))

    async def hcf(self, value: Any) -> int:
        return hcf(validate_integer_array(value, OperationKey.HCF))
