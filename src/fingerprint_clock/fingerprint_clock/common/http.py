from __future__ import annotations

from typing import Optional

from flask import jsonify

STATUS_BY_ERROR = {
    "ValidationError": 400,
    "EmployeeNotFound": 404,
    "CaptureTimeout": 408,
    "CaptureCancelled": 408,
    "SessionBusy": 409,
    "DuplicateTemplate": 409,
    "ConfirmationMismatch": 422,
    "NoMatch": 404,
    "DeviceError": 503,
    "StoreUnavailable": 503,
}


def status_for(error: Optional[str]) -> int:
    if error is None:
        return 200
    return STATUS_BY_ERROR.get(error, 400)


def result_response(result, *, success_status: int = 200):
    """JSON response for a workflow result (anything with success/error/to_dict)."""

    status = success_status if result.success else status_for(result.error)
    return jsonify(result.to_dict()), status


def error_response(message: str, *, error: str, status: int):
    return jsonify({"success": False, "message": message, "error": error}), status
