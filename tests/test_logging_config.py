import logging

from vizutil.geo.fit import fit_projection
from vizutil.utils.logging import configure_logging, level_from_name, logger

from _geo_helpers import make_collection


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("INFO") == logging.INFO
    assert level_from_name("none") == logging.WARNING
    assert level_from_name(None) == logging.WARNING
    assert level_from_name("bogus") == logging.WARNING


def test_configure_logging_is_idempotent():
    configure_logging(True, logging.DEBUG)
    configure_logging(True, logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    configure_logging(False)
    assert logger.level > logging.CRITICAL
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_fit_decision_logged_at_debug(planar, caplog):
    caplog.set_level(logging.DEBUG, logger="vizutil")
    fit_projection(planar, make_collection((0, 0, 200, 200)), [[0, 0], [100, 50]])
    assert any("height-determined" in r.getMessage() for r in caplog.records)
