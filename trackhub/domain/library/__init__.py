"""Library domain services (tracks, users)."""

from .payloads import TrackFields, UserFields
from .tracks import InvalidSortOrder, TrackService
from .users import UserService

__all__ = [
    "InvalidSortOrder",
    "TrackFields",
    "TrackService",
    "UserFields",
    "UserService",
]
