"""Domain Types: operation keys and JSON integer semantics."""

import math

import pytest

from bfhl.core.domain_types import OperationKey, is_json_integer


def test_operation_key_has_exactly_five_members():
    assert {k.value for k in OperationKey} == {"fibonacci", "prime", "lcm", "hcf", "AI"}


@pytest.mark.parametrize("value", [0, -3, 10**30, 4.0, -2.0])
def test_is_json_integer_accepts_integral_numbers(value):
    assert is_json_integer(value)


@pytest.mark.parametrize("value", [True, False, 1.5, "3", None, math.nan, math.inf, [1]])
def test_is_json_integer_rejects_everything_else(value):
    assert not is_json_integer(value)
