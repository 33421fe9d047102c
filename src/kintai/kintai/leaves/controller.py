from __future__ import annotations

from flask import Blueprint, g, jsonify, request

from ..container import Container
from ..users.guards import admin_required, current_user_id, token_required
from .schemas import LeaveDecisionRequest, LeaveSubmitRequest


def register(bp: Blueprint, container: Container) -> None:
    login_required = token_required(container)
    admin_only = admin_required(container)

    @bp.route("/leave-request", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        body = LeaveSubmitRequest.from_json(request.get_json(silent=True))
        container.leave_service.submit(
            user_id=current_user_id(),
            leave_date=body.leave_date,
            leave_type=body.leave_type,
            reason=body.reason,
        )
        return jsonify({"message": "休暇申請が作成されました"}), 201

    @bp.route("/leave-requests", methods=["GET"], endpoint="my_leave_requests")
    @login_required
    def my_leave_requests():
        rows = container.leave_service.list_own(user_id=current_user_id())
        return jsonify([r.to_json() for r in rows]), 200

    @bp.route("/leave-request/<int:request_id>", methods=["PATCH"], endpoint="patch_leave")
    @admin_only
    def patch_leave(request_id: int):
        body = LeaveDecisionRequest.from_json(request.get_json(silent=True))
        container.leave_service.update_status(
            current_role=g.user.role,
            request_id=request_id,
            status=body.status,
            require_match=False,
        )
        return jsonify({"message": f"休暇申請が{body.status.label}されました"}), 200

    @bp.route("/admin/leave-requests", methods=["GET"], endpoint="admin_leave_requests")
    @admin_only
    def admin_leave_requests():
        rows = container.leave_service.list_all(current_role=g.user.role)
        return jsonify([r.to_json() for r in rows]), 200

    @bp.route("/admin/leave-requests/<int:request_id>", methods=["PUT"], endpoint="admin_decide_leave")
    @admin_only
    def admin_decide_leave(request_id: int):
        body = LeaveDecisionRequest.from_json(request.get_json(silent=True))
        container.leave_service.update_status(
            current_role=g.user.role,
            request_id=request_id,
            status=body.status,
            require_match=True,
        )
        return jsonify({"message": f"申請 {request_id} を {body.status.label} に更新しました"}), 200
