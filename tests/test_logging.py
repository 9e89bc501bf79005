import logging

import structlog

from shortlink.core.logging import setup_logging


def test_setup_logging_debug():
    setup_logging(debug=True)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert logging.getLogger("redis").level == logging.WARNING


def test_setup_logging_json():
    setup_logging(debug=False)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
