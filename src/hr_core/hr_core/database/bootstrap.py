from __future__ import annotations

import logging
from typing import List

from ..container import Container
from ..permissions.validation import run_catalog_validation
from . import fixtures

logger = logging.getLogger(__name__)


def load_fixtures(container: Container, *, validate: bool = True) -> List[str]:
    """Seed every repository with the demo data.

    Returns the catalog validation messages (empty when ``validate`` is off or
    nothing is wrong); problems are reported, never raised.
    """
    for module in fixtures.MODULES:
        container.modules_repo.add(module)
    for permission in fixtures.PERMISSIONS:
        container.permissions_repo.add(permission)
    for role in fixtures.ROLES:
        container.roles_repo.add(role)
    for schedule in fixtures.SCHEDULES:
        container.schedules_repo.add(schedule)
    for user in fixtures.USERS:
        container.users_repo.add(user)
    for holiday in fixtures.PUBLIC_HOLIDAYS:
        container.holidays_repo.add(holiday)
    for closing in fixtures.CLOSING_DAYS:
        container.closing_days_repo.add(closing)
    for vacation in fixtures.VACATIONS:
        container.vacations_repo.add(vacation)
    for leave in fixtures.LEAVES:
        container.leaves_repo.add(leave)
    for timesheet in fixtures.TIMESHEETS:
        container.timesheets_repo.add(timesheet)

    logger.info(
        "Fixtures loaded: %d users, %d roles, %d permissions, %d timesheets",
        len(fixtures.USERS),
        len(fixtures.ROLES),
        len(fixtures.PERMISSIONS),
        len(fixtures.TIMESHEETS),
    )

    if not validate:
        return []
    return run_catalog_validation(
        container.permissions_repo.list(),
        container.modules_repo.list(),
        container.roles_repo.list(),
        container.users_repo.list(),
    )
