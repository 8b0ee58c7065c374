"""User create/update routes."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from trackhub.interfaces.http.responses import failure_response, user_service
from trackhub.observability.metrics import record_user_created
from trackhub.support.parsing import parse_int


user_bp = Blueprint('user_bp', __name__, url_prefix='/users')


@user_bp.route('/new', methods=['POST'])
def create_user():
    try:
        payload = request.get_json(silent=True) or {}
        user = user_service().create_user(payload.get('newUser'))
        record_user_created()
        return jsonify({'newData': user.to_dict()}), 200
    except Exception as exc:
        return failure_response("Error creating a new user", exc, handler="create_user")


@user_bp.route('/update/<user_id>', methods=['POST'])
def update_user(user_id: str):
    try:
        payload = request.get_json(silent=True) or {}
        user = user_service().update_user(parse_int(user_id), payload)
        # Same not-found policy as track updates
        if user is None:
            return jsonify({'message': "User not found."}), 404
        return jsonify({
            'message': "User updated successfully.",
            'updatedUser': user.to_dict(),
        }), 200
    except Exception as exc:
        return failure_response("Error updating the user", exc, handler="update_user")


__all__ = ['user_bp']
