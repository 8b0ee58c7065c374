from __future__ import annotations

from flask import Blueprint, Response
from prometheus_client import Counter, generate_latest

metrics_blueprint = Blueprint("metrics_bp", __name__)

CONTENT_TYPE_LATEST = "text/plain; version=0.0.4; charset=utf-8"

SEED_RUNS = Counter(
    "trackhub_seed_runs_total",
    "Total number of successful database reseeds.",
)
TRACKS_CREATED = Counter(
    "trackhub_tracks_created_total",
    "Total number of tracks created through the API.",
)
TRACKS_DELETED = Counter(
    "trackhub_tracks_deleted_total",
    "Total number of track rows deleted through the API.",
)
USERS_CREATED = Counter(
    "trackhub_users_created_total",
    "Total number of users created through the API.",
)
REQUEST_FAILURES = Counter(
    "trackhub_request_failures_total",
    "Requests that ended in an unexpected 500 error.",
    ["handler"],
)


def record_seed_run() -> None:
    SEED_RUNS.inc()


def record_track_created() -> None:
    TRACKS_CREATED.inc()


def record_tracks_deleted(count: int) -> None:
    if count > 0:
        TRACKS_DELETED.inc(count)


def record_user_created() -> None:
    USERS_CREATED.inc()


def record_request_failure(handler: str) -> None:
    REQUEST_FAILURES.labels(handler=handler).inc()


@metrics_blueprint.route("/metrics")
def metrics_endpoint() -> Response:
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
