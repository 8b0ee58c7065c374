from __future__ import annotations

import logging

from flask import Blueprint, jsonify
from sqlalchemy import text

from trackhub.database.db_manager import db

logger = logging.getLogger(__name__)

health_bp = Blueprint("health_bp", __name__)


@health_bp.route("/healthz")
def healthz():
    status = 200
    checks = {}

    try:
        db.session.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as exc:
        db.session.rollback()
        logger.warning("Health check database query failed: %s", exc)
        status = 503
        checks["database"] = f"error: {exc}"

    overall = "ok" if status == 200 else "degraded"
    return jsonify({"status": overall, "checks": checks}), status
