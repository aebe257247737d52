from flask import current_app
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from nutrilog.extensions import db
from nutrilog.services.user_service import ensure_user
from nutrilog.utils.auth import Identity, create_token, current_identity
from nutrilog.utils.http import ok, error, json_body

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


def verify_google_token(token: str) -> dict:
    client_id = current_app.config.get("GOOGLE_CLIENT_ID")
    return id_token.verify_oauth2_token(token, google_requests.Request(), audience=client_id)


def google_login_handler():
    data = json_body()
    token = data.get("token")
    if not token:
        return error("VALIDATION_ERROR", "Token required", 400)

    try:
        id_info = verify_google_token(token)
    except ValueError as e:
        current_app.logger.warning("Google token verification failed: %s", e)
        return error("UNAUTHORIZED", "Token verification failed", 401)

    if id_info.get("iss") not in GOOGLE_ISSUERS:
        return error("UNAUTHORIZED", "Invalid issuer", 401)

    email = (id_info.get("email") or "").strip().lower()
    if not email:
        return error("UNAUTHORIZED", "Email not found in token", 401)

    identity = Identity(email=email, name=id_info.get("name") or "", image=id_info.get("picture") or "")
    try:
        user = ensure_user(identity)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Sign-in failed for %s", email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    jwt_token = create_token(user.email, user.name, user.image, user_id=user.id)
    return ok({"token": jwt_token, "user": user.to_dict()})


def logout_handler():
    """
    Tokens are stateless; the client discards its copy. This endpoint only
    confirms the action.
    """
    return ok({"message": "Logged out successfully"})


def me_handler():
    identity = current_identity()
    try:
        user = ensure_user(identity)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Could not resolve user for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok(user.to_dict())
