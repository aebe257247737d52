"""
Food Controller Module

Catalog endpoints: search, create and partial update of foods.
"""

from flask import current_app

from nutrilog.extensions import db
from nutrilog.schemas.food_schema import CreateFoodSchema, UpdateFoodSchema
from nutrilog.services.food_service import search_foods, create_food, update_food
from nutrilog.utils.errors import DuplicateFoodError, NotFoundError
from nutrilog.utils.http import ok, error, json_body, arg_str, arg_int, validate_schema, first_error_message


def list_foods_handler():
    """
    Query Parameters:
        - q: optional case-insensitive name fragment
    """
    query = arg_str("q")
    try:
        foods = search_foods(query)
    except Exception:
        current_app.logger.exception("Food search failed (q=%r)", query)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok([food.to_dict() for food in foods])


def create_food_handler():
    data, errors = validate_schema(CreateFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Name, calories and carbs are required: " + first_error_message(errors),
                     400, details=errors)

    try:
        food = create_food(data)
    except DuplicateFoodError as e:
        return error("DUPLICATE_ENTRY", str(e), 409)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Creating food %r failed", data.get("name"))
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok(food.to_dict())


def update_food_handler():
    food_id = arg_int("id")
    if food_id is None:
        return error("VALIDATION_ERROR", "Food id is required", 400)

    data, errors = validate_schema(UpdateFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", first_error_message(errors), 400, details=errors)

    try:
        food = update_food(food_id, data)
    except NotFoundError as e:
        return error("NOT_FOUND", str(e), 404)
    except DuplicateFoodError as e:
        return error("DUPLICATE_ENTRY", str(e), 409)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Updating food %s failed", food_id)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok(food.to_dict())
