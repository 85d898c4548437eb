"""HR core package.

Feature modules (users, permissions, attendance, timesheets, ...) hold the
authorization and attendance-status resolution logic, with in-memory
repositories and a thin Flask controller layer on top.
"""
