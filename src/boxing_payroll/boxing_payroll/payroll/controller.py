from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..core.exceptions import StaffNotFoundError, ValidationError
from ..container import Container
from .service import parse_capability

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def domain_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except StaffNotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except Exception as e:
                logger.exception("unhandled error in %s", view.__name__)
                if bool(app.config.get("DEBUG", False)):
                    return jsonify({"error": f"Internal error: {e}"}), 500
                return jsonify({"error": "Internal error"}), 500

        return wrapper

    def _json_object() -> dict:
        payload = request.get_json(silent=True)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValidationError("JSON object body required")
        return payload

    @app.route("/staff", methods=["GET"], endpoint="list_staff")
    @domain_errors
    def list_staff():
        capability_s = request.args.get("capability")
        capability = parse_capability(capability_s) if capability_s else None
        return jsonify([s.to_dict() for s in service.roster(capability)])

    @app.route("/staff", methods=["POST"], endpoint="hire_staff")
    @domain_errors
    def hire_staff():
        payload = dict(_json_object())
        kind = payload.pop("kind", None)
        staff_id = payload.pop("id", None)
        name = payload.pop("name", None)
        if kind is None or staff_id is None:
            raise ValidationError("Both 'kind' and 'id' are required")

        staff = service.hire(kind, staff_id=staff_id, name=name, fields=payload)
        return jsonify(staff.to_dict()), 201

    @app.route("/staff/<int:staff_id>", methods=["GET"], endpoint="get_staff")
    @domain_errors
    def get_staff(staff_id: int):
        return jsonify(service.get(staff_id).to_dict())

    @app.route("/staff/<int:staff_id>/release", methods=["POST"], endpoint="release_staff")
    @domain_errors
    def release_staff(staff_id: int):
        return jsonify({"id": staff_id, "released": service.release(staff_id)})

    @app.route("/staff/<int:staff_id>/time-played", methods=["POST"], endpoint="record_time_played")
    @domain_errors
    def record_time_played(staff_id: int):
        payload = _json_object()
        if "minutes" not in payload:
            raise ValidationError("Field 'minutes' is required")
        staff = service.record_match_time(staff_id, payload["minutes"])
        return jsonify(staff.to_dict())

    @app.route("/payroll", methods=["GET"], endpoint="payroll_report")
    @domain_errors
    def payroll_report():
        report = service.build_payroll_report()
        return jsonify({"rows": report.rows, "total": report.total})
