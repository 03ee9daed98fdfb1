"""Manual JSON body decoding for endpoints that report malformed input themselves."""

import json
from typing import Any

from fastapi import Request


async def read_json_object(request: Request) -> dict[str, Any] | None:
    """Decode the request body; None unless it is a JSON object."""
    try:
        data = json.loads(await request.body())
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
