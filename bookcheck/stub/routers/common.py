"""Helpers shared by the stub routers."""

from typing import Any

from fastapi import Request


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    Read the request body as a JSON object.

    Empty, malformed or non-object bodies read as {}, which the routes then
    reject as missing fields.
    """
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
