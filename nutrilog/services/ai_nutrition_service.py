"""
AI Nutrition Service

Estimates per-100g nutrition facts for foods missing from the catalog by
asking Gemini for a strict JSON answer, and persists accepted estimates.
"""

import json
import logging
import math
import re
from typing import Any, Dict, Optional, Tuple

from flask import current_app
from google import genai
from google.genai import types
from sqlalchemy.exc import IntegrityError

from nutrilog.extensions import db
from nutrilog.models.diet_entry import DietEntry
from nutrilog.models.food import Food
from nutrilog.services.diet_log_service import build_entry
from nutrilog.services.food_service import build_food
from nutrilog.services.user_service import ensure_user
from nutrilog.utils.auth import Identity
from nutrilog.utils.errors import DuplicateFoodError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    'Please provide nutritional information for "{food_name}" per 100 grams. '
    "Return ONLY a valid JSON object with the following structure "
    "(no additional text or formatting):\n"
    "{{\n"
    '  "name": "exact food name",\n'
    '  "calories": number,\n'
    '  "protein": number,\n'
    '  "carbs": number,\n'
    '  "fat": number,\n'
    '  "fiber": number,\n'
    '  "sugar": number,\n'
    '  "sodium": number\n'
    "}}\n\n"
    "All values should be in grams except calories (kcal) and sodium (mg). "
    "Use realistic nutritional values based on standard food databases. "
    "If a nutrient is not applicable or unknown, use 0."
)

OPTIONAL_FIELDS = ("carbs", "fat", "fiber", "sugar", "sodium")

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")


def build_prompt(food_name: str) -> str:
    return PROMPT_TEMPLATE.format(food_name=food_name)


def strip_code_fences(text: str) -> str:
    """Remove a Markdown ```json / ``` wrapper around model output."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_OPEN.sub("", cleaned, count=1)
        cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)
    return cleaned.strip()


def _strict_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _lenient_number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_nutrition_estimate(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse and validate model output into a nutrition estimate.

    `name` must be a string and `calories`/`protein` numbers; the remaining
    nutrients default to 0 when missing, non-numeric or falsy.

    Returns:
        Normalized estimate dict, or None when the text does not validate
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except ValueError:
        logger.error("Could not parse AI response as JSON: %r", cleaned[:200])
        return None

    if not isinstance(data, dict):
        logger.error("AI response is not a JSON object: %r", data)
        return None

    name = data.get("name")
    calories = _strict_number(data.get("calories"))
    protein = _strict_number(data.get("protein"))
    if not isinstance(name, str) or calories is None or protein is None:
        logger.error("Invalid nutrition data structure: %r", data)
        return None

    estimate: Dict[str, Any] = {"name": name, "calories": calories, "protein": protein}
    for field in OPTIONAL_FIELDS:
        estimate[field] = _lenient_number(data.get(field))
    return estimate


def _extract_text(response: Any) -> Optional[str]:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        return None
    text = getattr(parts[0], "text", None)
    return text if isinstance(text, str) else None


def get_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def resolve_nutrition(food_name: str) -> Optional[Dict[str, Any]]:
    """
    Ask Gemini for per-100g nutrition facts of `food_name`.

    Every failure (missing key, transport or API error, unexpected
    envelope, unparseable or invalid JSON) yields None.
    """
    config = current_app.config
    api_key = config.get("GEMINI_API_KEY")
    if not api_key:
        logger.error("GEMINI_API_KEY is not configured; cannot resolve %r", food_name)
        return None

    try:
        client = get_client(api_key)
        response = client.models.generate_content(
            model=config.get("GEMINI_MODEL", "gemini-2.0-flash"),
            contents=build_prompt(food_name),
            config=types.GenerateContentConfig(
                temperature=config.get("AI_TEMPERATURE", 0.1),
                top_k=1,
                top_p=1,
                max_output_tokens=config.get("AI_MAX_OUTPUT_TOKENS", 500),
            ),
        )
    except Exception as e:
        logger.error("Gemini API error for %r: %s", food_name, e)
        return None

    text = _extract_text(response)
    if text is None:
        logger.error("Unexpected Gemini response structure for %r", food_name)
        return None

    estimate = parse_nutrition_estimate(text)
    if estimate is None:
        logger.warning("AI could not resolve nutrition for %r", food_name)
    return estimate


def accept_estimate(identity: Identity, estimate: Dict[str, Any], quantity: float,
                    meal_type: str) -> Tuple[Food, DietEntry]:
    """
    Store an AI estimate as a new catalog food and log it for the user.

    Both rows are committed together; on any failure neither is kept.

    Raises:
        DuplicateFoodError: A catalog food with the same name exists
    """
    user = ensure_user(identity)

    # Zero optional nutrients are stored as unknown
    record = dict(estimate)
    for field in OPTIONAL_FIELDS:
        record[field] = record.get(field) or None
    food = build_food(record)

    try:
        db.session.add(food)
        db.session.flush()
        entry = build_entry(user.id, food, quantity, meal_type)
        db.session.add(entry)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise DuplicateFoodError(f"Food '{estimate['name']}' already exists") from e
    except Exception:
        db.session.rollback()
        raise

    logger.info("User %s accepted AI food %r (food %s)", user.id, food.name, food.id)
    return food, entry
