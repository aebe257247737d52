import datetime as dt
from functools import wraps
from typing import NamedTuple, Optional
from flask import request, current_app
import jwt

from nutrilog.utils.http import error


class Identity(NamedTuple):
    """Authenticated caller as asserted by the identity provider."""
    email: str
    name: str = ""
    image: str = ""


def create_token(email: str, name: Optional[str] = None, image: Optional[str] = None,
                 user_id: Optional[int] = None) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    hours = current_app.config.get("JWT_EXPIRES_HOURS", 12)
    payload = {
        "sub": str(user_id) if user_id is not None else email,
        "email": email,
        "name": name or "",
        "picture": image or "",
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=hours)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def current_identity() -> Identity:
    return request.identity  # type: ignore


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return error("UNAUTHORIZED", "Missing Bearer token", 401)
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
        except jwt.PyJWTError:
            return error("UNAUTHORIZED", "Invalid token", 401)
        email = (payload.get("email") or "").strip().lower()
        if not email:
            return error("UNAUTHORIZED", "Token carries no email", 401)
        request.identity = Identity(  # type: ignore
            email=email,
            name=payload.get("name") or "",
            image=payload.get("picture") or "",
        )
        return f(*args, **kwargs)
    return wrapper


__all__ = ["Identity", "create_token", "decode_token", "current_identity", "require_auth"]
