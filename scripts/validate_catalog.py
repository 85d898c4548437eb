from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_core.hr_core.container import build_container
from src.hr_core.hr_core.core.logging_config import setup_logging
from src.hr_core.hr_core.database.bootstrap import load_fixtures


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container()
    errors = load_fixtures(container, validate=True)
    if errors:
        print(f"FAILED: {len(errors)} catalog problem(s)")
        for error in errors:
            print(f"  - {error}")
        return 1

    print(
        "OK: Catalog is consistent -> "
        f"{len(container.permissions_repo.list())} permissions, "
        f"{len(container.roles_repo.list())} roles, "
        f"{len(container.users_repo.list())} users"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
