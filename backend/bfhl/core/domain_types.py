"""Domain Types: operation keys and JSON number helpers.

Invariants:
    - All valid operation keys encoded as an Enum: no raw string matching
    - Keys are case-sensitive ("AI" is valid, "ai" is not)
    - bool is never an integer, even though it subclasses int in Python
"""

from enum import Enum
from typing import Any


class OperationKey(str, Enum):
    """The five request keys accepted by POST /bfhl."""
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


def is_json_integer(value: Any) -> bool:
    """True for JSON integers and for floats with no fractional part (5.0)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def as_int(value: Any) -> int:
    """Normalize a value that passed is_json_integer to a Python int."""
    return int(value)
