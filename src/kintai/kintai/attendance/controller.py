from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..container import Container
from ..users.guards import current_user_id, token_required
from .schemas import ClockInRequest, ClockOutRequest


def register(bp: Blueprint, container: Container) -> None:
    login_required = token_required(container)

    @bp.route("/attendance-status", methods=["GET"], endpoint="attendance_status")
    @login_required
    def attendance_status():
        view = container.attendance_service.get_status(current_user_id())
        return jsonify(view.to_json()), 200

    @bp.route("/clockin", methods=["POST"], endpoint="clockin")
    @login_required
    def clockin():
        body = ClockInRequest.from_json(request.get_json(silent=True))
        container.attendance_service.clock_in(current_user_id(), body.clock_in_time, work_date=body.work_date)
        return jsonify({"message": "出勤情報が記録されました"}), 200

    @bp.route("/clockout", methods=["POST"], endpoint="clockout")
    @login_required
    def clockout():
        body = ClockOutRequest.from_json(request.get_json(silent=True))
        container.attendance_service.clock_out(current_user_id(), body.clock_out_time, no_break=body.no_break)
        return jsonify({"message": "退勤情報が記録されました"}), 200
