from nutrilog.extensions import db
from nutrilog.services.nutrition_service import NutrientsPer100g


class Food(db.Model):
    """Catalog entry. Every nutrient column holds the amount per 100 grams."""
    __tablename__ = "foods"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False)
    calories = db.Column(db.Float, nullable=False)  # kcal
    protein = db.Column(db.Float, nullable=False, default=0)  # g
    carbs = db.Column(db.Float, nullable=True)  # g
    fat = db.Column(db.Float, nullable=True)  # g
    fiber = db.Column(db.Float, nullable=True)  # g
    sugar = db.Column(db.Float, nullable=True)  # g
    sodium = db.Column(db.Float, nullable=True)  # mg

    NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")

    @property
    def per_100g(self) -> NutrientsPer100g:
        return NutrientsPer100g(**{f: getattr(self, f) for f in self.NUTRIENT_FIELDS})

    def to_dict(self):
        data = {"id": self.id, "name": self.name}
        data.update({f: getattr(self, f) for f in self.NUTRIENT_FIELDS})
        return data

    def __repr__(self):
        return f"<Food {self.id}: {self.name}>"
