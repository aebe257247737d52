from datetime import datetime
from flask import current_app, jsonify
from sqlalchemy import text
from nutrilog.extensions import db


def home_index():
    return jsonify({
        "message": "Nutrilog API is running",
    })


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(text("SELECT 1"))
    except Exception as e:
        current_app.logger.error("Database health check failed: %s", e)
        db_status = "unhealthy"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": datetime.now().isoformat(),
    }), 200 if db_status == "healthy" else 503
