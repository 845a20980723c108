from __future__ import annotations

import logging

from src.fingerprint_clock.fingerprint_clock.common import logging_setup
from src.fingerprint_clock.fingerprint_clock.identification import service as identification_service


def test_configure_logging_is_idempotent():
    logging_setup.configure_logging("DEBUG")
    logger = logging_setup.configure_logging("WARNING")

    assert logger.name == "fingerprint_clock"
    for name in logging_setup.LOGGER_NAMES:
        handlers = logging.getLogger(name).handlers
        assert handlers.count(logging_setup._handler) == 1
        assert logging.getLogger(name).level == logging.WARNING


def test_module_loggers_reach_the_handler():
    logging_setup.configure_logging("INFO")
    module_logger = identification_service.logger

    covered = False
    current = module_logger
    while current is not None:
        if logging_setup._handler in current.handlers:
            covered = True
            break
        current = current.parent

    assert covered
