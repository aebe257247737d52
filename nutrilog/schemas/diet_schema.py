from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE
from nutrilog.utils.enums import MealType

MEAL_TYPES = [e.value for e in MealType]


class MealTypeMixin:
    @pre_load
    def lowercase_meal_type(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("mealType"), str):
            data = dict(data)
            data["mealType"] = data["mealType"].strip().lower()
        return data


def quantity_field():
    # Finite grams above zero; marshmallow rejects nan/inf by default
    return fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))


class CreateDietEntrySchema(MealTypeMixin, Schema):
    class Meta:
        unknown = EXCLUDE

    food_id = fields.Int(required=True, data_key="foodId")
    quantity = quantity_field()
    meal_type = fields.Str(required=True, data_key="mealType", validate=validate.OneOf(MEAL_TYPES))
    consumed_at = fields.DateTime(allow_none=True, data_key="consumedAt")

    @post_load
    def to_local_time(self, data, **kwargs):
        consumed_at = data.get("consumed_at")
        if consumed_at is not None and consumed_at.tzinfo is not None:
            data["consumed_at"] = consumed_at.astimezone().replace(tzinfo=None)
        return data


class NutritionEstimateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    calories = fields.Float(required=True, validate=validate.Range(min=0))
    protein = fields.Float(required=True, validate=validate.Range(min=0))
    carbs = fields.Float(allow_none=True, load_default=0)
    fat = fields.Float(allow_none=True, load_default=0)
    fiber = fields.Float(allow_none=True, load_default=0)
    sugar = fields.Float(allow_none=True, load_default=0)
    sodium = fields.Float(allow_none=True, load_default=0)


class ResolveFoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_name = fields.Str(required=True, data_key="foodName", validate=validate.Length(min=1, max=200))


class AcceptEstimateSchema(MealTypeMixin, Schema):
    class Meta:
        unknown = EXCLUDE

    nutrition_data = fields.Nested(NutritionEstimateSchema, required=True, data_key="nutritionData")
    quantity = quantity_field()
    meal_type = fields.Str(required=True, data_key="mealType", validate=validate.OneOf(MEAL_TYPES))
