"""
Business logic for users.

``UserStore`` keeps users in memory, keyed by id, in insertion order.
One instance is created per application and shared by every request
handler, so all access goes through a single lock.  Ids come from a
counter that only moves forward: an id is never handed out twice, even
after the user holding it has been deleted.

Names are unique.  ``create`` and ``update`` check this inside the same
critical section as the write, so two concurrent requests cannot both
claim a name.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..core.exceptions import UserConflictError, UserNotFoundError
from ..schemas.user import UserBase, UserRead


class UserStore:
    """In‑memory user collection."""

    def __init__(self, seed: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._users: Dict[int, UserRead] = {}
        self._last_id = 0
        for name in seed:
            self.create(UserBase(name=name))

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    @property
    def last_id(self) -> int:
        """The most recently assigned id (0 if none yet)."""
        with self._lock:
            return self._last_id

    def count(self) -> int:
        return len(self)

    def get_all(self) -> List[UserRead]:
        """Return a snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def find_by_id(self, user_id: int) -> Optional[UserRead]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_name(self, name: str) -> Optional[UserRead]:
        with self._lock:
            return self._find_by_name(name)

    def exists(self, user: UserBase) -> bool:
        """Return ``True`` if some user already has ``user.name``."""
        return self.find_by_name(user.name) is not None

    def create(self, user: UserBase) -> UserRead:
        """Assign the next id to ``user`` and store it.

        Raises ``UserConflictError`` if the name is already taken.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            if self._find_by_name(user.name) is not None:
                logger.warning("Rejected user '%s': name already exists", user.name)
                raise UserConflictError(user.name)
            self._last_id += 1
            record = UserRead(id=self._last_id, name=user.name)
            self._users[record.id] = record
        logger.info("Created user %s (%s)", record.id, record.name)
        return record

    def update(self, user: UserRead) -> UserRead:
        """Replace the user whose id is ``user.id``.

        The record keeps its position in the listing.  Raises
        ``UserNotFoundError`` for an unknown id and ``UserConflictError``
        if a different user already has the new name.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            if user.id not in self._users:
                logger.warning("Rejected update: user %s not found", user.id)
                raise UserNotFoundError(user.id)
            holder = self._find_by_name(user.name)
            if holder is not None and holder.id != user.id:
                logger.warning("Rejected update of user %s: name '%s' taken by %s", user.id, user.name, holder.id)
                raise UserConflictError(user.name)
            record = UserRead(id=user.id, name=user.name)
            # Assigning to an existing key keeps the dict order.
            self._users[record.id] = record
        logger.info("Updated user %s", record.id)
        return record

    def delete(self, user_id: int) -> bool:
        """Remove a user by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            logger.warning("Delete requested for unknown user %s", user_id)
            return False
        logger.info("Deleted user %s", user_id)
        return True

    def _find_by_name(self, name: str) -> Optional[UserRead]:
        # Caller must hold the lock.
        for user in self._users.values():
            if user.name == name:
                return user
        return None
