"""
Diet Controller Module

Handles diet log endpoints:
- Logging a catalog food against a meal
- Listing a day's (or all) entries
- Deleting an owned entry
- Daily totals and calorie goals
"""

from flask import current_app

from nutrilog.extensions import db
from nutrilog.schemas.diet_schema import CreateDietEntrySchema
from nutrilog.services.diet_log_service import log_entry, list_entries, delete_entry, summarize
from nutrilog.services.nutrition_service import calorie_goals
from nutrilog.services.user_service import ensure_user
from nutrilog.utils.auth import current_identity
from nutrilog.utils.errors import NotFoundError
from nutrilog.utils.http import (
    ok, error, json_body, arg_str, arg_int, validate_schema, first_error_message, parse_calendar_date,
)


def _day_arg():
    """Return (day, error_response) for the optional `date` query parameter."""
    raw = arg_str("date")
    if raw is None:
        return None, None
    day = parse_calendar_date(raw)
    if day is None:
        return None, error("VALIDATION_ERROR", "date must be YYYY-MM-DD or an ISO datetime", 400)
    return day, None


def create_diet_handler():
    """
    Body Parameters:
        - foodId (required): catalog food id
        - quantity (required): grams consumed, > 0
        - mealType (required): breakfast | lunch | dinner | snack
        - consumedAt (optional): ISO timestamp, defaults to now
    """
    data, errors = validate_schema(CreateDietEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Food, quantity and meal type are required: " + first_error_message(errors),
                     400, details=errors)

    identity = current_identity()
    try:
        user = ensure_user(identity)
        entry = log_entry(user.id, data["food_id"], data["quantity"], data["meal_type"], data.get("consumed_at"))
    except NotFoundError as e:
        return error("NOT_FOUND", str(e), 404)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Logging diet entry failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    return ok({"message": "Food added to diet", "userDiet": entry.to_dict()}, 201)


def list_diets_handler():
    """
    Query Parameters:
        - date: optional calendar day; without it the whole history is returned
    """
    day, err = _day_arg()
    if err:
        return err

    identity = current_identity()
    try:
        user = ensure_user(identity)
        entries = list_entries(user.id, day)
        payload = [entry.to_dict() for entry in entries]
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Listing diet entries failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok(payload)


def delete_diet_handler():
    entry_id = arg_int("id")
    if entry_id is None:
        return error("VALIDATION_ERROR", "Diet entry ID is required", 400)

    identity = current_identity()
    try:
        user = ensure_user(identity)
        delete_entry(user.id, entry_id)
    except NotFoundError as e:
        return error("NOT_FOUND", str(e), 404)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Deleting diet entry %s failed for %s", entry_id, identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)
    return ok({"message": "Diet entry deleted successfully"})


def diet_summary_handler():
    """
    Query Parameters:
        - date: calendar day to aggregate (all history when omitted)
        - activityLevel: sedentary | lightly_active | moderately_active | very_active
        - goal: lose | maintain | gain
    """
    day, err = _day_arg()
    if err:
        return err

    identity = current_identity()
    try:
        user = ensure_user(identity)
        summary = summarize(list_entries(user.id, day))
        goals = calorie_goals(
            user.to_dict(),
            arg_str("activityLevel", "moderately_active"),
            arg_str("goal", "maintain"),
            summary["total_calories"],
        )
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Diet summary failed for %s", identity.email)
        return error("INTERNAL_ERROR", "Internal Server Error", 500)

    return ok({
        "date": day.isoformat() if day else None,
        **summary,
        "goals": goals,
    })
