from threading import RLock
from typing import Dict, List, Optional

from tourguide.core.user import User


class UserRegistry:
    """
    In-memory, thread-safe store of the canonical User objects, keyed by name.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = RLock()

    def add(self, user: User) -> User:
        """Registers `user` unless the name is taken; returns the registered instance."""
        with self._lock:
            return self._users.setdefault(user.user_name, user)

    def get(self, user_name: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_name)

    def all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def __contains__(self, user_name: object) -> bool:
        with self._lock:
            return user_name in self._users

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
