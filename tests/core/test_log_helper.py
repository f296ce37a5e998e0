import logging

import pytest

from esdata.core._log_helper import LOGGER_NAME, configure_logging, warn
from esdata.query import Criteria, CriteriaCompiler


@pytest.fixture
def logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_warn(logger, caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        warn("field mapping missing")
    assert caplog.records[-1].getMessage() == "field mapping missing"
    assert caplog.records[-1].name == LOGGER_NAME


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nope", logging.INFO)],
)
def test_configure_logging(logger, level, expected):
    configure_logging(level)
    assert logger.level == expected
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_compiler_logs_skipped_nodes(logger, caplog):
    criteria = Criteria.where("a").is_(None).and_("b").is_("x")
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        CriteriaCompiler().compile(criteria)
    messages = [r.getMessage() for r in caplog.records]
    assert "Criteria on a contributes no clause" in messages
    assert "Compiled 0 should, 0 must_not, 1 must clauses" in messages
