"""Destructive reseed endpoint."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify

from trackhub.database.seed import seed_database
from trackhub.interfaces.http.responses import failure_response
from trackhub.observability.metrics import record_seed_run


logger = logging.getLogger(__name__)

seed_bp = Blueprint('seed_bp', __name__)


@seed_bp.route('/seed_db', methods=['GET'])
def seed_db():
    try:
        count = seed_database()
    except Exception as exc:
        return failure_response("Error seeding the data", exc, handler="seed_db")
    record_seed_run()
    logger.warning("Database reset and reseeded with %s tracks", count)
    return jsonify({'message': "Database seeding successful."}), 200


__all__ = ['seed_bp']
