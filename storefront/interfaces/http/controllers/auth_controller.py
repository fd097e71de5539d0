# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    PublicUserDTO,
    RegisterRequestDTO,
)
from storefront.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.username, dto.email, dto.password)

        payload = AuthSuccessDTO(
            message="User registered successfully",
            token=token,
            user=PublicUserDTO.from_entity(user),
        )
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(
            message="Login successful",
            token=token,
            user=PublicUserDTO.from_entity(user),
        )
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
