from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import ValidationError
from .model import decode_sample

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/device/samples", methods=["POST"], endpoint="push_sample")
    def push_sample():
        """Entry point for the scanner agent: one base64 sample per request."""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            data = {}
        try:
            raw = decode_sample(str(data.get("sample") or ""))
        except ValidationError as e:
            return error_response(str(e), error=e.code, status=400)

        if not container.device.push_sample(raw):
            return error_response("No capture is waiting for a sample", error="NotListening", status=409)
        return jsonify({"success": True, "message": "Sample accepted"}), 202

    @app.route("/api/device/cancel", methods=["POST"], endpoint="cancel_capture")
    def cancel_capture():
        cancelled = container.capture_session.cancel()
        return jsonify({"success": True, "cancelled": cancelled})

    @app.route("/api/device/readers", methods=["GET"], endpoint="list_readers")
    def list_readers():
        return jsonify(
            {
                "readers": container.device.enumerate(),
                "selected": container.capture_session.reader,
                "busy": container.capture_session.busy,
            }
        )

    @app.route("/api/status", methods=["GET"], endpoint="status")
    def status():
        return jsonify({"messages": [m.to_dict() for m in container.notifier.recent()]})
