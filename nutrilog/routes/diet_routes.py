from flask import Blueprint
from nutrilog.utils.auth import require_auth
from nutrilog.controllers.diet_controller import (
    create_diet_handler,
    list_diets_handler,
    delete_diet_handler,
    diet_summary_handler,
)

diet_bp = Blueprint("user_diets", __name__, url_prefix="/api/user-diets")


@diet_bp.post("")
@require_auth
def create_diet():
    return create_diet_handler()


@diet_bp.get("")
@require_auth
def list_diets():
    return list_diets_handler()


@diet_bp.delete("")
@require_auth
def delete_diet():
    return delete_diet_handler()


@diet_bp.get("/summary")
@require_auth
def diet_summary():
    return diet_summary_handler()
