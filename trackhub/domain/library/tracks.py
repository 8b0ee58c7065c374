from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy import asc, delete, desc, select

from trackhub.database.db_manager import Track
from .payloads import coerce_track_fields


logger = logging.getLogger(__name__)

_SORT_DIRECTIONS = {
    "ASC": asc,
    "DESC": desc,
}


class InvalidSortOrder(ValueError):
    """Raised when a sort direction other than ASC/DESC is requested."""


class TrackService:
    """Track reads and writes, one database operation per call."""

    def __init__(self, session):
        self.session = session

    def list_tracks(self) -> List[Track]:
        return list(self.session.scalars(select(Track).order_by(Track.id)))

    def get_track(self, track_id: Optional[int]) -> Optional[Track]:
        if track_id is None:
            return None
        return self.session.get(Track, track_id)

    def tracks_by_artist(self, artist: str) -> List[Track]:
        stmt = select(Track).where(Track.artist == artist).order_by(Track.id)
        return list(self.session.scalars(stmt))

    def tracks_sorted_by_release_year(self, order: Optional[str] = None) -> List[Track]:
        """Sort by release year; no order means ascending, ties broken by id."""
        if order is None:
            direction = asc
        else:
            direction = _SORT_DIRECTIONS.get(order.strip().upper())
            if direction is None:
                raise InvalidSortOrder(f"Invalid sort order: {order!r} (expected ASC or DESC)")
        stmt = select(Track).order_by(direction(Track.release_year), Track.id)
        return list(self.session.scalars(stmt))

    def create_track(self, payload: Optional[Any]) -> Track:
        track = Track(**coerce_track_fields(payload))
        self.session.add(track)
        self._commit()
        logger.info("Created track %s", track.id)
        return track

    def update_track(self, track_id: Optional[int], payload: Optional[Any]) -> Optional[Track]:
        track = self.get_track(track_id)
        if track is None:
            return None
        changes = coerce_track_fields(payload)
        for field, value in changes.items():
            setattr(track, field, value)
        self._commit()
        logger.info("Updated track %s fields=%s", track.id, sorted(changes))
        return track

    def delete_track(self, track_id: Optional[int]) -> int:
        """Delete matching rows and return how many were removed."""
        if track_id is None:
            return 0
        result = self.session.execute(delete(Track).where(Track.id == track_id))
        self._commit()
        deleted = result.rowcount or 0
        if deleted:
            logger.info("Deleted track %s", track_id)
        return deleted

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


__all__ = ["InvalidSortOrder", "TrackService"]
