"""POST /bfhl: HTTP-level tests through the ASGI app.

Tests cover:
    - success envelope with the configured email
    - 400 envelopes for key and input errors
    - malformed JSON and empty bodies
    - 413 for bodies above 10 KB
    - Gemini failure -> 500 without details
    - integers with thousands of digits, in and out
    - chunked bodies without Content-Length
"""

import sys

import pytest

from bfhl.core.arithmetic import fibonacci
from bfhl.core.errors import GeminiAPIError

EMAIL = "operator@example.com"


async def test_fibonacci_success(client):
    res = await client.post("/bfhl", json={"fibonacci": 5})
    assert res.status_code == 200
    assert res.json() == {"is_success": True, "official_email": EMAIL, "data": [0, 1, 1, 2, 3]}


async def test_prime_success_excludes_non_integers(client):
    res = await client.post("/bfhl", json={"prime": [2, 3, 4, "5", 5.5, 6, 7]})
    assert res.status_code == 200
    assert res.json()["data"] == [2, 3, 7]


async def test_lcm_and_hcf_success(client):
    lcm_res = await client.post("/bfhl", json={"lcm": [4, 6]})
    hcf_res = await client.post("/bfhl", json={"hcf": [6, 10, 15]})
    assert lcm_res.json()["data"] == 12
    assert hcf_res.json()["data"] == 1


async def test_ai_success_uses_generator(client, fake_generator):
    fake_generator.reply = "Mumbai!"
    res = await client.post("/bfhl", json={"AI": "Financial capital of India?"})
    assert res.status_code == 200
    assert res.json()["data"] == "Mumbai"
    assert len(fake_generator.prompts) == 1


@pytest.mark.parametrize("body", [{}, {"fibonacci": 3, "hcf": [2, 4]}])
async def test_key_count_error(client, body):
    res = await client.post("/bfhl", json=body)
    assert res.status_code == 400
    assert res.json() == {
        "is_success": False, "official_email": EMAIL,
        "error": "Request must contain exactly one key",
    }


async def test_invalid_key(client):
    res = await client.post("/bfhl", json={"factorial": 5})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid key"


async def test_negative_fibonacci(client):
    res = await client.post("/bfhl", json={"fibonacci": -4})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid fibonacci input"


async def test_malformed_json(client):
    res = await client.post(
        "/bfhl", content=b'{"fibonacci": ', headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {
        "is_success": False, "official_email": EMAIL, "error": "Malformed JSON body",
    }


async def test_empty_body_is_zero_keys(client):
    res = await client.post("/bfhl", content=b"", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["error"] == "Request must contain exactly one key"


async def test_body_over_limit_is_413(client):
    big = {"prime": list(range(5000))}
    res = await client.post("/bfhl", json=big)
    assert res.status_code == 413
    assert res.json() == {
        "is_success": False, "official_email": EMAIL, "error": "Payload too large",
    }


async def test_body_just_under_limit_is_processed(client):
    padding = "x" * (10 * 1024 - 20)
    res = await client.post("/bfhl", json={"AI": padding})
    assert res.status_code == 200


async def test_gemini_failure_is_500(client, fake_generator):
    fake_generator.reply = GeminiAPIError(status_code=429)
    res = await client.post("/bfhl", json={"AI": "Who painted the Mona Lisa?"})
    assert res.status_code == 500
    assert res.json() == {
        "is_success": False, "official_email": EMAIL, "error": "Internal Server Error",
    }


# ─── large integers ──────────────────────────────────────────────

async def test_hcf_of_large_consecutive_fibonacci_numbers(client):
    seq = fibonacci(3002)
    res = await client.post("/bfhl", json={"hcf": [seq[-1], seq[-2]]})
    assert res.status_code == 200
    assert res.json()["data"] == 1


@pytest.mark.parametrize("body, expected", [
    ({"hcf": [6, -4]}, 2),
    ({"hcf": [-6, 4]}, -2),
    ({"lcm": [6, -4]}, -12),
])
async def test_mixed_sign_hcf_and_lcm(client, body, expected):
    res = await client.post("/bfhl", json=body)
    assert res.status_code == 200
    assert res.json()["data"] == expected


async def test_integer_literal_with_thousands_of_digits(client):
    big = 10**4400 + 1
    content = b'{"lcm": [' + str(big).encode() + b"]}"
    assert len(content) < 10 * 1024
    res = await client.post("/bfhl", content=content, headers={"Content-Type": "application/json"})
    assert res.status_code == 200
    assert res.json()["data"] == big


async def test_fibonacci_terms_beyond_4300_digits(client):
    res = await client.post("/bfhl", json={"fibonacci": 21000})
    assert res.status_code == 200
    data = res.json()["data"]
    assert len(data) == 21000
    assert data[-1] == fibonacci(21000)[-1]
    assert len(str(data[-1])) > 4300


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit on this interpreter",
)
async def test_digit_limit_error_while_parsing_is_malformed_body(client):
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        content = b'{"lcm": [' + b"9" * 4400 + b"]}"
        res = await client.post(
            "/bfhl", content=content, headers={"Content-Type": "application/json"},
        )
    finally:
        sys.set_int_max_str_digits(previous)
    assert res.status_code == 400
    assert res.json()["error"] == "Malformed JSON body"


# ─── chunked bodies ──────────────────────────────────────────────

async def _chunked(parts):
    for part in parts:
        yield part


async def test_chunked_body_over_limit_is_413(client):
    parts = [b'{"AI": "'] + [b"x" * 1024] * 20 + [b'"}']
    res = await client.post(
        "/bfhl", content=_chunked(parts), headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 413
    assert res.json()["error"] == "Payload too large"


async def test_chunked_body_under_limit_is_processed(client):
    parts = [b'{"fibonacci"', b": 4}"]
    res = await client.post(
        "/bfhl", content=_chunked(parts), headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json()["data"] == [0, 1, 1, 2]
