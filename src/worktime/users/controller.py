from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.http import login_required, parse_model
from ..core.constants import DEFAULT_SESSION_DAYS
from ..container import Container
from .schemas import LoginRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    def _user_json(s_user) -> dict:
        return {"id": s_user.user_id, "username": s_user.username}

    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        payload = parse_model(LoginRequest, request.get_json(silent=True))
        user_id = container.auth_service.register(payload.username, payload.password)
        s_user = container.auth_service.get_session_user(user_id)

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        logger.info("Registered user %s", s_user.username)
        return jsonify(_user_json(s_user)), 201

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        payload = parse_model(LoginRequest, request.get_json(silent=True))
        s_user = container.auth_service.authenticate(payload.username, payload.password)

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        return jsonify(_user_json(s_user))

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/user", methods=["GET"], endpoint="api_user")
    @login_required
    def api_user():
        s_user = container.auth_service.get_session_user(session.get("user_id"))
        return jsonify(_user_json(s_user))
