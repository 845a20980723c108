from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response, result_response, status_for
from ..core.exceptions import DomainError
from ..container import Container
from .model import EmployeeProfile

logger = logging.getLogger(__name__)


def _text(value) -> Optional[str]:
    return None if value is None else str(value)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/enroll", methods=["POST"], endpoint="enroll_employee")
    def enroll_employee():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            data = {}
        profile = EmployeeProfile(
            name=_text(data.get("name")) or "",
            role=_text(data.get("role")),
            department=_text(data.get("department")),
            email=_text(data.get("email")),
        )
        try:
            result = container.enrollment.enroll(profile)
        except Exception:
            logger.exception("Unexpected error during enrollment")
            return error_response("System error during enrollment", error="InternalError", status=500)
        return result_response(result, success_status=201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            employee = container.employee_service.get(employee_id)
        except DomainError as e:
            return error_response(str(e), error=e.code, status=status_for(e.code))
        except Exception:
            logger.exception("Unexpected error loading employee %s", employee_id)
            return error_response("System error", error="InternalError", status=500)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>/deactivate", methods=["POST"], endpoint="deactivate_employee")
    def deactivate_employee(employee_id: int):
        try:
            employee = container.employee_service.deactivate(employee_id)
        except DomainError as e:
            return error_response(str(e), error=e.code, status=status_for(e.code))
        except Exception:
            logger.exception("Unexpected error deactivating employee %s", employee_id)
            return error_response("System error", error="InternalError", status=500)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>/records", methods=["GET"], endpoint="employee_records")
    def employee_records(employee_id: int):
        try:
            start = request.args.get("start")
            end = request.args.get("end")
            records = container.attendance.history(
                employee_id,
                start=parse_iso_date(start) if start else None,
                end=parse_iso_date(end) if end else None,
            )
        except ValueError:
            return error_response("Dates must be YYYY-MM-DD", error="ValidationError", status=400)
        except DomainError as e:
            return error_response(str(e), error=e.code, status=status_for(e.code))
        except Exception:
            logger.exception("Unexpected error loading records for employee %s", employee_id)
            return error_response("System error", error="InternalError", status=500)
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})
