"""Shared JSON response helpers for the route blueprints."""

from __future__ import annotations

import logging

from flask import current_app, jsonify

from trackhub.database.db_manager import db
from trackhub.observability.metrics import record_request_failure


logger = logging.getLogger(__name__)


def failure_response(message: str, exc: Exception, *, handler: str):
    """Roll back, log and report an unexpected error as a 500."""
    try:
        db.session.rollback()
    except Exception as rollback_exc:  # pragma: no cover - session already unusable
        logger.warning("Session rollback failed after %s: %s", handler, rollback_exc)
    logger.exception("%s failed: %s", handler, exc)
    record_request_failure(handler)
    return jsonify({"message": message, "error": str(exc)}), 500


def track_service():
    return current_app.extensions["track_service"]


def user_service():
    return current_app.extensions["user_service"]


__all__ = ["failure_response", "track_service", "user_service"]
