SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

LOAD_FIXTURES = True
VALIDATE_CATALOG = True

MAX_REPORT_DAYS = 366
