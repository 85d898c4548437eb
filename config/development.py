import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the in-memory repositories with the demo catalog and users on startup
LOAD_FIXTURES = bool(int(os.getenv("LOAD_FIXTURES", "1")))
# Report catalog problems (unknown modules, sections, actions) after seeding
VALIDATE_CATALOG = bool(int(os.getenv("VALIDATE_CATALOG", "1")))

# Longest range a single attendance listing may cover
MAX_REPORT_DAYS = int(os.getenv("MAX_REPORT_DAYS", "366"))
