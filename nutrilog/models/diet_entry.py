from datetime import datetime
from nutrilog.extensions import db
from nutrilog.services.nutrition_service import scale


class DietEntry(db.Model):
    __tablename__ = "user_diets"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id"), nullable=False)
    quantity = db.Column(db.Float, nullable=False)  # grams
    meal_type = db.Column(db.String(20), nullable=False)
    # Naive server-local time; day filtering relies on it
    consumed_at = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)

    user = db.relationship("User", back_populates="diets")
    food = db.relationship("Food", lazy="joined")

    def nutrients(self):
        return scale(self.food.per_100g, self.quantity)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "foodId": self.food_id,
            "quantity": self.quantity,
            "mealType": self.meal_type,
            "consumedAt": self.consumed_at.isoformat() if self.consumed_at else None,
            "food": self.food.to_dict() if self.food else None,
            "nutrients": self.nutrients().to_dict() if self.food else None,
        }
