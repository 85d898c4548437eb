"""Consistency checks over the permission catalogs.

Runs at load time and only reports: resolution keeps working (deny by
default) whatever these checks find.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Sequence

from ..core.constants import UNCONDITIONAL
from ..users.model import User
from .model import Grant, ModuleDefinition, PermissionDefinition, PermissionRequirement, RoleDefinition

logger = logging.getLogger(__name__)


def _index(permissions: Iterable[PermissionDefinition]) -> Mapping[str, PermissionDefinition]:
    return {p.id: p for p in permissions}


def validate_permission_catalog(
    permissions: Sequence[PermissionDefinition],
    modules: Sequence[ModuleDefinition],
) -> List[str]:
    errors: List[str] = []
    modules_by_id = {m.id: m for m in modules}
    known_sections = {s for m in modules for s in m.section_ids}

    for permission in permissions:
        module = modules_by_id.get(permission.module_id)
        if module is None:
            errors.append(f"Permission '{permission.id}' has invalid module_id '{permission.module_id}'")
        if permission.section_id not in known_sections:
            errors.append(f"Permission '{permission.id}' has invalid section_id '{permission.section_id}'")
        elif module is not None and permission.section_id not in module.section_ids:
            errors.append(
                f"Permission '{permission.id}': section '{permission.section_id}' "
                f"doesn't belong to module '{permission.module_id}'"
            )
    return errors


def validate_grant(grant: Grant, permissions: Sequence[PermissionDefinition]) -> List[str]:
    definition = _index(permissions).get(grant.permission_id)
    if definition is None:
        return [f"Grant references non-existent permission '{grant.permission_id}'"]

    valid = set(definition.actions)
    errors = []
    for action in sorted(grant.actions):
        if action == UNCONDITIONAL:
            continue
        if action not in valid:
            errors.append(
                f"Grant '{grant.permission_id}' has invalid action '{action}'. "
                f"Valid actions: [{', '.join(definition.actions)}]"
            )
    return errors


def validate_requirement(requirement: PermissionRequirement, permissions: Sequence[PermissionDefinition]) -> List[str]:
    definition = _index(permissions).get(requirement.permission_id)
    if definition is None:
        return [f"PermissionRequirement references non-existent permission '{requirement.permission_id}'"]
    if requirement.action not in definition.actions:
        return [
            f"PermissionRequirement '{requirement.permission_id}' has invalid action '{requirement.action}'. "
            f"Valid actions: [{', '.join(definition.actions)}]"
        ]
    return []


def validate_grants(grants: Sequence[Grant], permissions: Sequence[PermissionDefinition]) -> List[str]:
    errors: List[str] = []
    for index, grant in enumerate(grants):
        errors.extend(f"Grant[{index}]: {e}" for e in validate_grant(grant, permissions))
    return errors


def validate_requirements(
    requirements: Sequence[PermissionRequirement],
    permissions: Sequence[PermissionDefinition],
) -> List[str]:
    errors: List[str] = []
    for index, requirement in enumerate(requirements):
        errors.extend(f"PermissionRequirement[{index}]: {e}" for e in validate_requirement(requirement, permissions))
    return errors


def run_catalog_validation(
    permissions: Sequence[PermissionDefinition],
    modules: Sequence[ModuleDefinition],
    roles: Sequence[RoleDefinition],
    users: Sequence[User],
) -> List[str]:
    """Check every catalog and grant, log what is wrong, and return the messages."""
    errors = validate_permission_catalog(permissions, modules)

    for role in roles:
        errors.extend(f"Role '{role.id}': {e}" for e in validate_grants(role.grants, permissions))

    for user in users:
        errors.extend(f"User '{user.username}': {e}" for e in validate_grants(user.grants, permissions))

    for error in errors:
        logger.warning("Catalog validation: %s", error)
    if not errors:
        logger.info("Catalog validation passed (%d permissions, %d roles)", len(permissions), len(roles))
    return errors
