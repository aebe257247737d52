from datetime import datetime
from nutrilog.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False, default="")
    image = db.Column(db.String(500), nullable=False, default="")
    age = db.Column(db.Integer, nullable=True)
    weight = db.Column(db.Float, nullable=True)  # kg
    height = db.Column(db.Float, nullable=True)  # cm
    gender = db.Column(db.String(10), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    diets = db.relationship("DietEntry", back_populates="user", lazy="dynamic")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "image": self.image,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "gender": self.gender,
        }

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
