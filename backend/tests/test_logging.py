import logging

import pytest

from recipe_budget.logging import HANDLER_NAME, ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture(name="restore_levels")
def restore_levels_fixture():
    names = [None, ROOT_LOGGER, "sqlalchemy.engine"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_get_logger_keeps_package_modules_under_the_package():
    assert get_logger().name == "recipe_budget"
    assert get_logger("recipe_budget.api.recipes").name == "recipe_budget.api.recipes"
    assert get_logger("__main__").name == "recipe_budget.__main__"
    assert get_logger("scripts.import").name == "recipe_budget.scripts.import"


def test_configure_logging_sets_package_level_and_quiets_sql(restore_levels):
    logger = configure_logging("debug")
    assert logger.name == ROOT_LOGGER
    assert logger.level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    configure_logging("warning")
    assert logging.getLogger(ROOT_LOGGER).level == logging.WARNING


def test_configure_logging_installs_at_most_one_handler(restore_levels):
    configure_logging("info")
    configure_logging("info")
    ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) <= 1
