from __future__ import annotations

from typing import Any, Optional

from flask import jsonify
from marshmallow import ValidationError


def error_response(code: str, message: str, status: int, details: Optional[list[dict[str, Any]]] = None):
    payload: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        payload["error"]["details"] = details
    return jsonify(payload), status


def validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_schema": exc.messages}
    return [{"field": key, "issue": ", ".join(map(str, value))} for key, value in messages.items()]
