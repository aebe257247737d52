from flask import current_app

from nutrilog.extensions import db
from nutrilog.schemas.user_schema import UserProfileUpdateSchema
from nutrilog.services.user_service import get_profile, update_profile
from nutrilog.utils.auth import current_identity
from nutrilog.utils.errors import NotFoundError
from nutrilog.utils.http import ok, error, json_body, validate_schema, first_error_message


def get_profile_handler():
    identity = current_identity()
    try:
        profile = get_profile(identity.email)
    except NotFoundError as e:
        return error("NOT_FOUND", str(e), 404)
    except Exception:
        current_app.logger.exception("Fetching profile failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok(profile)


def update_profile_handler():
    data, errors = validate_schema(UserProfileUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", first_error_message(errors), 400, details=errors)

    identity = current_identity()
    try:
        profile = update_profile(identity, data)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Updating profile failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    return ok({"message": "Profile updated successfully", "user": profile})
