"""BFHL Route: POST /bfhl, the multiplexed operation endpoint.

Invariants:
    - Body larger than max_body_bytes -> 413 before any parsing
    - Bodies without Content-Length are streamed and cut off at the limit
    - Body that is not valid JSON -> 400 "Malformed JSON body"
    - Empty body is treated as an empty object (-> "exactly one key" error)
    - Everything after parsing is delegated to OperationDispatch
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bfhl.api.dependencies import get_dispatch
from bfhl.config import Settings, get_settings
from bfhl.core.errors import MalformedBodyError, PayloadTooLargeError
from bfhl.services.operation_dispatch import OperationDispatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["bfhl"])


async def read_json_body(request: Request, limit: int) -> Any:
    """Read and decode the request body, enforcing the byte limit.

    Chunked bodies carry no Content-Length, so the running total is checked
    per chunk and reading stops as soon as it passes the limit.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(int(declared), limit)

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise PayloadTooLargeError(received, limit)
        chunks.append(chunk)

    raw = b"".join(chunks)
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise MalformedBodyError(str(e)) from e


@router.post("/bfhl")
async def run_operation(
    request: Request,
    settings: Settings = Depends(get_settings),
    dispatch: OperationDispatch = Depends(get_dispatch),
):
    """Dispatch the single key in the body to its operation."""
    body = await read_json_body(request, settings.max_body_bytes)
    result = await dispatch.dispatch(body)
    return JSONResponse(status_code=result.status_code, content=result.body)
