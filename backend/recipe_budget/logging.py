import logging
import sys
from typing import Optional

from recipe_budget.config import settings

ROOT_LOGGER = "recipe_budget"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
HANDLER_NAME = "recipe_budget.stdout"

# Chatty at INFO; raise them explicitly to debug the ORM or the server.
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx")


def _installed_handler(root: logging.Logger) -> Optional[logging.Handler]:
    return next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send every logger to stdout in the pipe-separated format.

    level defaults to settings.log_level. Calling again only updates the level;
    the stdout handler is installed once, and not at all when something else
    (pytest, uvicorn --log-config) already configured the root logger.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    resolved = (level or settings.log_level).upper()
    if _installed_handler(root) is not None:
        root.setLevel(resolved)
    logging.getLogger(ROOT_LOGGER).setLevel(resolved)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger(ROOT_LOGGER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == "__main__" or not name.startswith(ROOT_LOGGER):
        # scripts run with python -m still log under the package tree
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(name)
