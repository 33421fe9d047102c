from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..container import Container
from .guards import current_user_id, token_required
from .schemas import LoginRequest, RegisterRequest


def register(bp: Blueprint, container: Container) -> None:
    login_required = token_required(container)

    @bp.route("/login", methods=["POST"], endpoint="login")
    def login():
        body = LoginRequest.from_json(request.get_json(silent=True))
        session_user = container.auth_service.authenticate(body.email, body.password)
        return jsonify(session_user.to_json()), 200

    @bp.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        body = RegisterRequest.from_json(request.get_json(silent=True))
        container.auth_service.register(email=body.email, user_name=body.user_name, password=body.password)
        return jsonify({"message": "ユーザー登録が完了しました"}), 200

    @bp.route("/user", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        return jsonify(container.user_service.get_profile(current_user_id())), 200
