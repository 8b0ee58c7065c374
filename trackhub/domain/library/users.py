from __future__ import annotations

import logging
from typing import Any, Optional

from trackhub.database.db_manager import User
from .payloads import coerce_user_fields


logger = logging.getLogger(__name__)


class UserService:
    """Create and update open-record users."""

    def __init__(self, session):
        self.session = session

    def get_user(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        return self.session.get(User, user_id)

    def create_user(self, payload: Optional[Any]) -> User:
        user = User(attributes=coerce_user_fields(payload))
        self.session.add(user)
        self._commit()
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: Optional[int], payload: Optional[Any]) -> Optional[User]:
        user = self.get_user(user_id)
        if user is None:
            return None
        merged = dict(user.attributes or {})
        merged.update(coerce_user_fields(payload))
        # Reassign so the JSON column is flagged dirty
        user.attributes = merged
        self._commit()
        logger.info("Updated user %s", user.id)
        return user

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


__all__ = ["UserService"]
