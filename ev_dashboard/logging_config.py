"""
Logging configuration for the EV adoption dashboard
"""
import logging
import logging.handlers
from pathlib import Path

from ev_dashboard import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level=None, logs_dir=None, log_to_file=None):
    """Configure logging for the entire application.

    Safe to call on every Streamlit re-run: existing root handlers are
    replaced, not stacked.
    """
    level = level or config.LOG_LEVEL
    logs_dir = Path(logs_dir) if logs_dir is not None else config.LOGS_DIR
    if log_to_file is None:
        log_to_file = config.LOG_TO_FILE

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if not log_to_file:
        logging.debug("File logging disabled")
        return root_logger

    logs_dir.mkdir(parents=True, exist_ok=True)
    dashboard_log = logs_dir / "dashboard.log"
    errors_log = logs_dir / "errors.log"

    # Dashboard file handler (all logs)
    dashboard_handler = logging.handlers.RotatingFileHandler(
        dashboard_log,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    dashboard_handler.setLevel(level)
    dashboard_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(dashboard_handler)

    # Error file handler (errors only)
    error_handler = logging.handlers.RotatingFileHandler(
        errors_log,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        LOG_FORMAT + '\n%(pathname)s:%(lineno)d',
        datefmt=DATE_FORMAT
    ))
    root_logger.addHandler(error_handler)

    logging.info(f"Dashboard logs: {dashboard_log}")
    logging.info(f"Error logs: {errors_log}")
    return root_logger
