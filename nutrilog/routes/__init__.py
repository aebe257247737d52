from .home_routes import home_bp
from .auth_routes import auth_bp
from .food_routes import food_bp
from .ai_food_routes import ai_food_bp
from .diet_routes import diet_bp
from .user_routes import user_bp


def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(ai_food_bp)
    app.register_blueprint(diet_bp)
    app.register_blueprint(user_bp)
