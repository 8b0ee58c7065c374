"""Request payload coercion for library writes."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class TrackFields(BaseModel):
    """Track columns a client may set; every field optional, unknown keys dropped."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    genre: Optional[str] = None
    release_year: Optional[int] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    duration: Optional[int] = None

    def changes(self) -> Dict[str, Any]:
        """Only the fields present in the original payload (explicit nulls included)."""
        return self.model_dump(exclude_unset=True)


class UserFields(BaseModel):
    """Open user record; all keys are kept except the row id."""

    model_config = ConfigDict(extra="allow")

    def changes(self) -> Dict[str, Any]:
        extra = dict(self.model_extra or {})
        extra.pop("id", None)
        return extra


def coerce_track_fields(payload: Optional[Any]) -> Dict[str, Any]:
    return TrackFields.model_validate(payload if payload is not None else {}).changes()


def coerce_user_fields(payload: Optional[Any]) -> Dict[str, Any]:
    return UserFields.model_validate(payload if payload is not None else {}).changes()


__all__ = ["TrackFields", "UserFields", "coerce_track_fields", "coerce_user_fields"]
