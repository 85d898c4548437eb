from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import ModuleDefinition, PermissionDefinition, RoleDefinition
from .repository import ModuleRepository, PermissionRepository, RoleRepository


class InMemoryPermissionRepository(PermissionRepository):
    def __init__(self, definitions: Iterable[PermissionDefinition] = ()) -> None:
        self._table: InMemoryTable[PermissionDefinition] = InMemoryTable(lambda p: p.id, name="permission")
        for d in definitions:
            self._table.add(d)

    def get(self, permission_id: str) -> Optional[PermissionDefinition]:
        return self._table.get(permission_id)

    def list(self) -> Sequence[PermissionDefinition]:
        return self._table.list()

    def add(self, definition: PermissionDefinition) -> PermissionDefinition:
        return self._table.add(definition)


class InMemoryRoleRepository(RoleRepository):
    def __init__(self, roles: Iterable[RoleDefinition] = ()) -> None:
        self._table: InMemoryTable[RoleDefinition] = InMemoryTable(lambda r: r.id, name="role")
        for r in roles:
            self._table.add(r)

    def get(self, role_id: str) -> Optional[RoleDefinition]:
        return self._table.get(role_id)

    def list(self) -> Sequence[RoleDefinition]:
        return self._table.list()

    def add(self, role: RoleDefinition) -> RoleDefinition:
        return self._table.add(role)


class InMemoryModuleRepository(ModuleRepository):
    def __init__(self, modules: Iterable[ModuleDefinition] = ()) -> None:
        self._table: InMemoryTable[ModuleDefinition] = InMemoryTable(lambda m: m.id, name="module")
        for m in modules:
            self._table.add(m)

    def list(self) -> Sequence[ModuleDefinition]:
        return self._table.list()

    def add(self, module: ModuleDefinition) -> ModuleDefinition:
        return self._table.add(module)
