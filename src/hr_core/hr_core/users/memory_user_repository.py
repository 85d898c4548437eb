from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[User] = InMemoryTable(lambda u: u.user_id, name="user")

    def get(self, user_id: str) -> Optional[User]:
        return self._table.get(user_id)

    def list(self) -> Sequence[User]:
        return sorted(self._table.list(), key=lambda u: u.user_id)

    def add(self, user: User) -> User:
        return self._table.add(user)
