from __future__ import annotations

import logging

from src.hr_core.hr_core.database import fixtures
from src.hr_core.hr_core.permissions.model import (
    Grant,
    ModuleDefinition,
    PermissionDefinition,
    PermissionRequirement,
    RoleDefinition,
)
from src.hr_core.hr_core.permissions.validation import (
    run_catalog_validation,
    validate_grant,
    validate_grants,
    validate_permission_catalog,
    validate_requirement,
    validate_requirements,
)

MODULES = (
    ModuleDefinition(id="hr", section_ids=("users", "attendance")),
    ModuleDefinition(id="files", section_ids=("downloads",)),
)
USERS_MANAGE = PermissionDefinition("hr-users-manage", "hr", "users", ("create", "read"))


def test_demo_catalog_is_consistent():
    errors = run_catalog_validation(fixtures.PERMISSIONS, fixtures.MODULES, fixtures.ROLES, fixtures.USERS)
    assert errors == []


def test_unknown_module_and_section_are_reported():
    bad = PermissionDefinition("p1", "payroll", "nowhere", ("read",))

    errors = validate_permission_catalog([bad], MODULES)

    assert errors == [
        "Permission 'p1' has invalid module_id 'payroll'",
        "Permission 'p1' has invalid section_id 'nowhere'",
    ]


def test_section_of_another_module_is_reported():
    misplaced = PermissionDefinition("p2", "files", "users", ("read",))

    errors = validate_permission_catalog([misplaced], MODULES)

    assert errors == ["Permission 'p2': section 'users' doesn't belong to module 'files'"]


def test_grant_with_undefined_action():
    errors = validate_grant(Grant("hr-users-manage", frozenset({"read", "fly"})), [USERS_MANAGE])

    assert len(errors) == 1
    assert "invalid action 'fly'" in errors[0]
    assert "[create, read]" in errors[0]


def test_grant_to_unknown_permission():
    errors = validate_grant(Grant("ghost", frozenset({"read"})), [USERS_MANAGE])
    assert errors == ["Grant references non-existent permission 'ghost'"]


def test_unconditional_grant_is_always_valid():
    assert validate_grant(Grant("hr-users-manage", frozenset({"true"})), [USERS_MANAGE]) == []


def test_requirement_checks():
    assert validate_requirement(PermissionRequirement("hr-users-manage", "read"), [USERS_MANAGE]) == []
    assert validate_requirement(PermissionRequirement("hr-users-manage", "delete"), [USERS_MANAGE])
    assert validate_requirement(PermissionRequirement("ghost", "read"), [USERS_MANAGE]) == [
        "PermissionRequirement references non-existent permission 'ghost'"
    ]


def test_list_validators_prefix_the_index():
    grants = [Grant("hr-users-manage", frozenset({"read"})), Grant("ghost", frozenset({"read"}))]
    requirements = [PermissionRequirement("hr-users-manage", "fly")]

    assert validate_grants(grants, [USERS_MANAGE]) == ["Grant[1]: Grant references non-existent permission 'ghost'"]
    assert validate_requirements(requirements, [USERS_MANAGE])[0].startswith("PermissionRequirement[0]: ")


def test_run_validation_logs_each_problem(caplog):
    role = RoleDefinition(id="role-bad", name="Bad", grants=(Grant("ghost", frozenset({"read"})),))

    with caplog.at_level(logging.WARNING):
        errors = run_catalog_validation([USERS_MANAGE], MODULES, [role], [])

    assert errors == ["Role 'role-bad': Grant[0]: Grant references non-existent permission 'ghost'"]
    assert "non-existent permission 'ghost'" in caplog.text
