"""
Response envelope shared by every route:

    {"success": true, "message"?: str, "data"?: ...}

Errors use the same envelope with ``success: false`` (see ``main.py``).
"""

from typing import Any, Optional


def ok(data: Any = None, message: Optional[str] = None) -> dict:
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
