"""Effective permissions of a user and point queries against them.

Grants are additive: the actions a user holds for a permission are the union
of every role grant and every individual grant for it. Anything not granted
is denied, including permissions missing from the catalog.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..core.constants import SUPER_USER_PERMISSION, UNCONDITIONAL
from ..users.model import User
from .model import PermissionDefinition, PermissionRequirement
from .repository import PermissionRepository, RoleRepository

logger = logging.getLogger(__name__)

EffectiveGrants = Dict[str, frozenset]


class PermissionResolver:
    def __init__(self, permissions: PermissionRepository, roles: RoleRepository):
        self._permissions = permissions
        self._roles = roles

    def effective_grants(self, user: Optional[User]) -> EffectiveGrants:
        if user is None:
            return {}

        merged: Dict[str, set] = {}
        for role_id in user.role_ids:
            role = self._roles.get(role_id)
            if role is None:
                logger.debug("User %s references unknown role %s", user.user_id, role_id)
                continue
            for grant in role.grants:
                merged.setdefault(grant.permission_id, set()).update(grant.actions)

        for grant in user.grants:
            merged.setdefault(grant.permission_id, set()).update(grant.actions)

        return {permission_id: frozenset(actions) for permission_id, actions in merged.items()}

    def is_super_user(self, user: Optional[User]) -> bool:
        return self._is_super(self.effective_grants(user))

    def has_permission(self, user: Optional[User], permission_id: str, action: str) -> bool:
        grants = self.effective_grants(user)
        if self._is_super(grants):
            return True
        return self._allows(grants, permission_id, action)

    def has_any_permission(self, user: Optional[User], requirements: Sequence[PermissionRequirement]) -> bool:
        """OR over the requirements. An empty list is a denial."""
        if not requirements:
            return False
        grants = self.effective_grants(user)
        if self._is_super(grants):
            return True
        return any(self._allows(grants, r.permission_id, r.action) for r in requirements)

    def has_all_permissions(self, user: Optional[User], requirements: Sequence[PermissionRequirement]) -> bool:
        """AND over the requirements. An empty list is a denial too, callers
        wanting "no restriction" must not call this at all."""
        if not requirements:
            return False
        grants = self.effective_grants(user)
        if self._is_super(grants):
            return True
        return all(self._allows(grants, r.permission_id, r.action) for r in requirements)

    def has_any_action_for_permission(self, user: Optional[User], permission_id: str) -> bool:
        grants = self.effective_grants(user)
        if self._is_super(grants):
            return True
        return bool(grants.get(permission_id))

    def get_user_actions_for_permission(self, user: Optional[User], permission_id: str) -> Tuple[str, ...]:
        return tuple(sorted(self.effective_grants(user).get(permission_id, ())))

    def has_module_access(self, user: Optional[User], module_id: str) -> bool:
        return self._has_catalog_match(user, lambda d: d.module_id == module_id)

    def has_section_access(self, user: Optional[User], section_id: str) -> bool:
        return self._has_catalog_match(user, lambda d: d.section_id == section_id)

    def _has_catalog_match(self, user: Optional[User], matches: Callable[[PermissionDefinition], bool]) -> bool:
        if user is None:
            return False
        grants = self.effective_grants(user)
        if self._is_super(grants):
            return True

        for permission_id, actions in grants.items():
            if not actions:
                continue
            definition = self._permissions.get(permission_id)
            if definition is not None and matches(definition):
                return True
        return False

    @staticmethod
    def _is_super(grants: EffectiveGrants) -> bool:
        return UNCONDITIONAL in grants.get(SUPER_USER_PERMISSION, ())

    @staticmethod
    def _allows(grants: EffectiveGrants, permission_id: str, action: str) -> bool:
        actions = grants.get(permission_id)
        if actions is None:
            return False
        if UNCONDITIONAL in actions:
            return True
        return action in actions
