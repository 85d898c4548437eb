from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def list(self) -> Sequence[User]:
        raise NotImplementedError

    def add(self, user: User) -> User:
        raise NotImplementedError
