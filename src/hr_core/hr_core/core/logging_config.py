import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure application logging (console only)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers so repeated app creation does not duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # Werkzeug request lines are noisy at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    return root_logger
