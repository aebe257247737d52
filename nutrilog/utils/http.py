from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    val = val.strip()
    return val or default


def arg_int(name: str) -> Optional[int]:
    try:
        return int(request.args.get(name, ""))
    except (TypeError, ValueError):
        return None


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any]) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    try:
        return schema_cls().load(data), None
    except ValidationError as e:
        return {}, e.messages


def first_error_message(errors: Dict[str, Any]) -> str:
    """Flatten marshmallow messages into a single human-readable sentence."""
    for field, messages in errors.items():
        if isinstance(messages, dict):
            return first_error_message(messages)
        message = messages[0] if isinstance(messages, list) and messages else str(messages)
        if field == "_schema":
            return message
        return f"{field}: {message}"
    return "Invalid input"


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        # Stored timestamps are naive server-local time
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_calendar_date(value: Any) -> Optional[date]:
    """Accept YYYY-MM-DD or a full ISO datetime and return its calendar date."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        pass
    parsed = parse_iso_datetime(value)
    return parsed.date() if parsed else None
