from flask import Blueprint
from nutrilog.utils.auth import require_auth
from nutrilog.controllers.user_controller import get_profile_handler, update_profile_handler

user_bp = Blueprint("user_profile", __name__, url_prefix="/api/user-profile")


@user_bp.get("")
@require_auth
def get_profile():
    return get_profile_handler()


@user_bp.put("")
@require_auth
def update_profile():
    return update_profile_handler()
