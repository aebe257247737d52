"""
Food Service

Catalog lookup, insert and partial update of food records.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from nutrilog.extensions import db
from nutrilog.models.food import Food
from nutrilog.utils.errors import DuplicateFoodError, NotFoundError


def search_foods(query: Optional[str] = None) -> List[Food]:
    """
    Case-insensitive substring search on food name.

    Without a query the full catalog is returned. Results are ordered by
    name descending, which existing clients rely on.
    """
    q = Food.query
    if query:
        q = q.filter(Food.name.icontains(query, autoescape=True))
    return q.order_by(desc(Food.name)).all()


def get_food(food_id: int) -> Food:
    food = db.session.get(Food, food_id)
    if not food:
        raise NotFoundError("Food not found")
    return food


def build_food(data: Dict[str, Any]) -> Food:
    """Instantiate (without persisting) a Food from validated fields."""
    return Food(
        name=data["name"],
        calories=data["calories"],
        protein=data.get("protein") or 0,
        carbs=data.get("carbs"),
        fat=data.get("fat"),
        fiber=data.get("fiber"),
        sugar=data.get("sugar"),
        sodium=data.get("sodium"),
    )


def _ensure_name_free(name: str, exclude_id: Optional[int] = None) -> None:
    q = Food.query.filter(Food.name == name)
    if exclude_id is not None:
        q = q.filter(Food.id != exclude_id)
    if q.first():
        raise DuplicateFoodError(f"Food '{name}' already exists")


def create_food(data: Dict[str, Any]) -> Food:
    _ensure_name_free(data["name"])
    food = build_food(data)
    db.session.add(food)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise DuplicateFoodError(f"Food '{data['name']}' already exists") from e
    return food


def update_food(food_id: int, data: Dict[str, Any]) -> Food:
    """Merge provided, non-null fields over the stored row."""
    food = get_food(food_id)
    if data.get("name") and data["name"] != food.name:
        _ensure_name_free(data["name"], exclude_id=food.id)

    for field in ("name",) + Food.NUTRIENT_FIELDS:
        if data.get(field) is not None:
            setattr(food, field, data[field])

    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise DuplicateFoodError(f"Food '{food.name}' already exists") from e
    return food
