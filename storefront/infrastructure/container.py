# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.application.services.token_service import JwtTokenService
from storefront.application.use_cases.products.create_product import CreateProductUseCase
from storefront.application.use_cases.products.delete_product import DeleteProductUseCase
from storefront.application.use_cases.products.get_product import GetProductUseCase
from storefront.application.use_cases.products.list_products import ListProductsUseCase
from storefront.application.use_cases.products.update_product import UpdateProductUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.verify_token import VerifyTokenUseCase
from storefront.infrastructure.repositories.products.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.product_controller import ProductController
from storefront.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        auth = self._config.auth
        return JwtTokenService(
            secret=auth.jwt_secret,
            ttl_seconds=auth.token_ttl_seconds,
            algorithm=auth.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def verify_token_use_case(self) -> VerifyTokenUseCase:
        return VerifyTokenUseCase(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def product_controller(self) -> ProductController:
        products = self.product_repository
        return ProductController(
            verify_token=self.verify_token_use_case,
            list_use_case=ListProductsUseCase(products=products),
            get_use_case=GetProductUseCase(products=products),
            create_use_case=CreateProductUseCase(products=products),
            update_use_case=UpdateProductUseCase(products=products),
            delete_use_case=DeleteProductUseCase(products=products),
        )


container = Container()
