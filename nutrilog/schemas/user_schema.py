from marshmallow import Schema, fields, validate, pre_load, EXCLUDE
from nutrilog.utils.enums import Gender


class UserProfileUpdateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    age = fields.Int(allow_none=True, validate=validate.Range(min=1, max=150, error="Age must be between 1 and 150"))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=1, max=1000, error="Weight must be between 1 and 1000 kg"))
    height = fields.Float(allow_none=True, validate=validate.Range(min=50, max=300, error="Height must be between 50 and 300 cm"))
    gender = fields.Str(
        allow_none=True,
        validate=validate.OneOf([e.value for e in Gender], error="Gender must be either 'male' or 'female'"),
    )

    @pre_load
    def lowercase_gender(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("gender"), str):
            data = dict(data)
            data["gender"] = data["gender"].strip().lower()
        return data
