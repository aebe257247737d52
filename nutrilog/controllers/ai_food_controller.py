from flask import current_app

from nutrilog.extensions import db
from nutrilog.schemas.diet_schema import ResolveFoodSchema, AcceptEstimateSchema
from nutrilog.services.ai_nutrition_service import resolve_nutrition, accept_estimate
from nutrilog.utils.auth import current_identity
from nutrilog.utils.errors import DuplicateFoodError
from nutrilog.utils.http import ok, error, json_body, validate_schema, first_error_message


def resolve_food_handler():
    data, errors = validate_schema(ResolveFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Food name is required", 400, details=errors)
    food_name = data["food_name"].strip()
    if not food_name:
        return error("VALIDATION_ERROR", "Food name is required", 400)

    try:
        estimate = resolve_nutrition(food_name)
    except Exception:
        current_app.logger.exception("AI food search failed for %r", food_name)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    if estimate is None:
        return error("NUTRITION_NOT_FOUND", "Could not get nutrition data from AI", 404)
    return ok(estimate)


def accept_food_handler():
    """
    Body Parameters:
        - nutritionData (required): estimate returned by POST /api/ai-food
        - quantity (required): grams consumed, > 0
        - mealType (required): breakfast | lunch | dinner | snack

    Responds 409 DUPLICATE_ENTRY when a catalog food already has the
    estimate's exact name; nothing is written in that case.
    """
    data, errors = validate_schema(AcceptEstimateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR",
                     "Nutrition data, quantity, and meal type are required: " + first_error_message(errors),
                     400, details=errors)

    identity = current_identity()
    try:
        food, entry = accept_estimate(identity, data["nutrition_data"], data["quantity"], data["meal_type"])
    except DuplicateFoodError as e:
        return error("DUPLICATE_ENTRY", str(e), 409)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Adding AI food failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    return ok({
        "message": "AI food added successfully",
        "food": food.to_dict(),
        "userDiet": entry.to_dict(),
    }, 201)
