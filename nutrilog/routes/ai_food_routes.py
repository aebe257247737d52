from flask import Blueprint
from nutrilog.utils.auth import require_auth
from nutrilog.controllers.ai_food_controller import resolve_food_handler, accept_food_handler

ai_food_bp = Blueprint("ai_food", __name__, url_prefix="/api/ai-food")


@ai_food_bp.post("")
@require_auth
def resolve_food():
    return resolve_food_handler()


@ai_food_bp.put("")
@require_auth
def accept_food():
    return accept_food_handler()
