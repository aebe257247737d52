from marshmallow import Schema, fields, validate, pre_load, EXCLUDE

_non_negative = validate.Range(min=0)


class StripNameMixin:
    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = dict(data)
            data["name"] = data["name"].strip()
        return data


class CreateFoodSchema(StripNameMixin, Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    calories = fields.Float(required=True, validate=_non_negative)
    carbs = fields.Float(required=True, validate=_non_negative)
    protein = fields.Float(allow_none=True, validate=_non_negative)
    fat = fields.Float(allow_none=True, validate=_non_negative)
    fiber = fields.Float(allow_none=True, validate=_non_negative)
    sugar = fields.Float(allow_none=True, validate=_non_negative)
    sodium = fields.Float(allow_none=True, validate=_non_negative)


class UpdateFoodSchema(StripNameMixin, Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(allow_none=True, validate=validate.Length(min=1, max=255))
    calories = fields.Float(allow_none=True, validate=_non_negative)
    carbs = fields.Float(allow_none=True, validate=_non_negative)
    protein = fields.Float(allow_none=True, validate=_non_negative)
    fat = fields.Float(allow_none=True, validate=_non_negative)
    fiber = fields.Float(allow_none=True, validate=_non_negative)
    sugar = fields.Float(allow_none=True, validate=_non_negative)
    sodium = fields.Float(allow_none=True, validate=_non_negative)
