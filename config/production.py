import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOAD_FIXTURES = bool(int(os.getenv("LOAD_FIXTURES", "0")))
VALIDATE_CATALOG = bool(int(os.getenv("VALIDATE_CATALOG", "1")))

MAX_REPORT_DAYS = int(os.getenv("MAX_REPORT_DAYS", "366"))
