# --- src/logicsim_core/log_config.py ---
import logging
import sys

PACKAGE_LOGGER_NAME = "logicsim_core"
LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level=logging.INFO, logger_name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """
    Attaches a single stdout handler to the package logger.

    Only the package logger is touched, so an embedding application keeps full
    control of the root logger. Calling this again replaces the previous handler
    instead of stacking a second one.
    """
    package_logger = logging.getLogger(logger_name)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.setLevel(level)
    package_logger.addHandler(console_handler)
    package_logger.debug("Logging configured at level %s.", logging.getLevelName(level))
    return package_logger
