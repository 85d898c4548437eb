from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..core.constants import UNCONDITIONAL, UNCONDITIONAL_ALIASES


def normalize_actions(actions: Iterable[str]) -> frozenset:
    """Fold the unconditional-grant aliases into the single sentinel."""
    return frozenset(UNCONDITIONAL if a in UNCONDITIONAL_ALIASES else a for a in actions)


@dataclass(frozen=True)
class PermissionDefinition:
    """Catalog entry: which actions exist for a permission, and where it lives."""

    id: str
    module_id: str
    section_id: str
    actions: Tuple[str, ...]
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ModuleDefinition:
    id: str
    section_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Grant:
    """A (permission, action-set) pair contributed by a role or a user."""

    permission_id: str
    actions: frozenset

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", normalize_actions(self.actions))

    @property
    def is_unconditional(self) -> bool:
        return UNCONDITIONAL in self.actions


@dataclass(frozen=True)
class RoleDefinition:
    id: str
    name: str
    grants: Tuple[Grant, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class PermissionRequirement:
    permission_id: str
    action: str
