"""
Diet Log Service

Handles diet entry creation, day listing, ownership-checked deletion and
the daily aggregation consumers display.
"""

from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import desc

from nutrilog.extensions import db
from nutrilog.models.diet_entry import DietEntry
from nutrilog.models.food import Food
from nutrilog.services.food_service import get_food
from nutrilog.services.nutrition_service import NutrientAmounts
from nutrilog.utils.enums import MealType
from nutrilog.utils.errors import NotFoundError

END_OF_DAY = time(23, 59, 59, 999000)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Inclusive [00:00:00.000, 23:59:59.999] range of a local calendar day."""
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)


def build_entry(user_id: int, food: Food, quantity: float, meal_type: str,
                consumed_at: Optional[datetime] = None) -> DietEntry:
    entry = DietEntry(
        user_id=user_id,
        food=food,
        quantity=float(quantity),
        meal_type=MealType(meal_type).value,
    )
    if consumed_at is not None:
        entry.consumed_at = consumed_at
    return entry


def log_entry(user_id: int, food_id: int, quantity: float, meal_type: str,
              consumed_at: Optional[datetime] = None) -> DietEntry:
    """
    Record consumption of a catalog food.

    Raises:
        NotFoundError: food_id does not reference a catalog food
    """
    food = get_food(food_id)
    entry = build_entry(user_id, food, quantity, meal_type, consumed_at)
    db.session.add(entry)
    db.session.commit()
    return entry


def list_entries(user_id: int, day: Optional[date] = None) -> List[DietEntry]:
    """Entries of a user, newest first, optionally limited to one calendar day."""
    query = DietEntry.query.filter(DietEntry.user_id == user_id)
    if day is not None:
        start, end = day_bounds(day)
        query = query.filter(DietEntry.consumed_at >= start, DietEntry.consumed_at <= end)
    return query.order_by(desc(DietEntry.consumed_at), desc(DietEntry.id)).all()


def delete_entry(user_id: int, entry_id: int) -> None:
    """
    Delete an entry owned by the user.

    Raises:
        NotFoundError: entry missing or owned by someone else
    """
    entry = DietEntry.query.filter_by(id=entry_id, user_id=user_id).first()
    if not entry:
        raise NotFoundError("Diet entry not found")
    db.session.delete(entry)
    db.session.commit()


def summarize(entries: Iterable[DietEntry]) -> Dict[str, Any]:
    """
    Daily totals and per-meal subtotals.

    Each entry contributes food.calories * quantity / 100.
    """
    totals = NutrientAmounts()
    meals: Dict[str, Dict[str, Any]] = {
        m.value: {"entries": 0, "calories": 0.0} for m in MealType
    }
    for entry in entries:
        amounts = entry.nutrients()
        totals = totals + amounts
        meal = meals.setdefault(entry.meal_type, {"entries": 0, "calories": 0.0})
        meal["entries"] += 1
        meal["calories"] += amounts.calories

    return {
        "total_calories": totals.calories,
        "totals": totals.to_dict(),
        "meals": meals,
    }
