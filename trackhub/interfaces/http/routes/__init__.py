"""Route blueprints exposed via Flask."""

from .seed import seed_bp
from .tracks import track_bp
from .users import user_bp
from .health import health_bp

__all__ = [
    "seed_bp",
    "track_bp",
    "user_bp",
    "health_bp",
]
