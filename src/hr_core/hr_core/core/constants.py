"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

SUPER_USER_PERMISSION = "super-user"

OWN_TIMESHEETS_PERMISSION = "hr-attendance-manage-owns"
OTHERS_TIMESHEETS_PERMISSION = "hr-attendance-manage-others"

# Single sentinel for an unconditional grant; the aliases are accepted on input.
UNCONDITIONAL = "*"
UNCONDITIONAL_ALIASES = frozenset({"true", "all", "*"})

DEFAULT_REPORT_DAYS = 7
ACTING_USER_HEADER = "X-User-Id"
