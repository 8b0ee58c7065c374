"""Track listing, lookup, sorting and CRUD routes."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from trackhub.interfaces.http.responses import failure_response, track_service
from trackhub.observability.metrics import record_track_created, record_tracks_deleted
from trackhub.support.parsing import parse_int


track_bp = Blueprint('track_bp', __name__, url_prefix='/tracks')


def _serialize_all(tracks) -> list[dict]:
    return [track.to_dict() for track in tracks]


@track_bp.route('', methods=['GET'])
def list_tracks():
    try:
        tracks = track_service().list_tracks()
        if not tracks:
            return jsonify({'message': "No tracks found."}), 404
        return jsonify({'tracks': _serialize_all(tracks)}), 200
    except Exception as exc:
        return failure_response("Error fetching tracks", exc, handler="list_tracks")


@track_bp.route('/details/<track_id>', methods=['GET'])
def track_details(track_id: str):
    try:
        track = track_service().get_track(parse_int(track_id))
        if track is None:
            return jsonify({'error': "Track not found."}), 404
        return jsonify({'track': track.to_dict()}), 200
    except Exception as exc:
        return failure_response("Error fetching a track by Id", exc, handler="track_details")


@track_bp.route('/artist/<artist>', methods=['GET'])
def tracks_by_artist(artist: str):
    try:
        tracks = track_service().tracks_by_artist(artist)
        if not tracks:
            return jsonify({'message': "Track not found."}), 404
        return jsonify({'tracks': _serialize_all(tracks)}), 200
    except Exception as exc:
        return failure_response("Error fetching track by an artist", exc, handler="tracks_by_artist")


@track_bp.route('/sort/release_year', methods=['GET'])
def tracks_by_release_year():
    try:
        tracks = track_service().tracks_sorted_by_release_year(request.args.get('order'))
        if not tracks:
            return jsonify({'error': "No tracks found"}), 404
        return jsonify({'tracks': _serialize_all(tracks)}), 200
    except Exception as exc:
        return failure_response("Error sorting the tracks", exc, handler="tracks_by_release_year")


@track_bp.route('/new', methods=['POST'])
def create_track():
    try:
        payload = request.get_json(silent=True) or {}
        track = track_service().create_track(payload.get('newTrack'))
        record_track_created()
        return jsonify({'newTrack': track.to_dict()}), 200
    except Exception as exc:
        return failure_response("Error adding new track.", exc, handler="create_track")


@track_bp.route('/update/<track_id>', methods=['POST'])
def update_track(track_id: str):
    try:
        payload = request.get_json(silent=True) or {}
        track = track_service().update_track(parse_int(track_id), payload)
        if track is None:
            return jsonify({'message': "Track not found."}), 404
        return jsonify({
            'message': "Track updated successfully.",
            'updatedTrack': track.to_dict(),
        }), 200
    except Exception as exc:
        return failure_response("Error updating the Id", exc, handler="update_track")


@track_bp.route('/delete', methods=['POST'])
def delete_track():
    try:
        payload = request.get_json(silent=True) or {}
        deleted = track_service().delete_track(parse_int(payload.get('id')))
        if deleted == 0:
            return jsonify({'message': "Track not found."}), 404
        record_tracks_deleted(deleted)
        return jsonify({'message': "Track record has been deleted successfully."}), 200
    except Exception as exc:
        return failure_response("Error deleting the track by Id", exc, handler="delete_track")


__all__ = ['track_bp']
