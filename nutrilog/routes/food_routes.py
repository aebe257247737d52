from flask import Blueprint
from nutrilog.utils.auth import require_auth
from nutrilog.controllers.food_controller import (
    list_foods_handler,
    create_food_handler,
    update_food_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api/food")


@food_bp.get("")
@require_auth
def list_foods():
    return list_foods_handler()


@food_bp.post("")
@require_auth
def create_food():
    return create_food_handler()


@food_bp.put("")
@require_auth
def update_food():
    return update_food_handler()
