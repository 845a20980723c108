from __future__ import annotations

import logging

from flask import Flask

from ..common.http import error_response, result_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/clock", methods=["POST"], endpoint="clock")
    def clock():
        """Scan a finger and record IN/OUT for whoever it belongs to."""
        try:
            result = container.timeclock.clock()
        except Exception:
            logger.exception("Unexpected error during authentication")
            return error_response("System error during authentication", error="InternalError", status=500)
        return result_response(result, success_status=201)
