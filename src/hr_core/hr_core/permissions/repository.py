from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ModuleDefinition, PermissionDefinition, RoleDefinition


class PermissionRepository(Protocol):
    """Read access to the permission definition catalog."""

    def get(self, permission_id: str) -> Optional[PermissionDefinition]:
        raise NotImplementedError

    def list(self) -> Sequence[PermissionDefinition]:
        raise NotImplementedError


class RoleRepository(Protocol):
    def get(self, role_id: str) -> Optional[RoleDefinition]:
        raise NotImplementedError

    def list(self) -> Sequence[RoleDefinition]:
        raise NotImplementedError


class ModuleRepository(Protocol):
    def list(self) -> Sequence[ModuleDefinition]:
        raise NotImplementedError
