import logging

from betacompare import Posterior, batch_credible_interval, compare, compare_all
from betacompare.utils import get_logger


def test_compare_logs_strategy(caplog):
    post = Posterior(10, 10)
    with caplog.at_level(logging.DEBUG, logger="betacompare"):
        compare(post, post, "exact")
    messages = [record.message for record in caplog.records]
    assert any("strategy exact" in m for m in messages)
    assert any("Summing 10 closed-form terms" in m for m in messages)


def test_batch_logs_count(caplog):
    post = Posterior(10, 10)
    with caplog.at_level(logging.DEBUG, logger="betacompare"):
        batch_credible_interval(post, [post, post])
    assert any("2 credible intervals" in record.message for record in caplog.records)


def test_compare_all_logs_skipped(caplog):
    post = Posterior(10, 10)
    with caplog.at_level(logging.INFO, logger="betacompare"):
        compare_all(post, post)
    assert any("Skipping simulation" in record.message for record in caplog.records)


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("betacompare").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger():
    logger = get_logger("test_logger")
    assert logger.name == "test_logger"
