# noqa: D104 - package initialization
from .logging import configure_structured_logging  # noqa: F401
from .metrics import (  # noqa: F401
    metrics_blueprint,
    record_request_failure,
    record_seed_run,
    record_track_created,
    record_tracks_deleted,
    record_user_created,
)
