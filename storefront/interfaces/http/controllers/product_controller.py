# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.products.create_product import CreateProductUseCase
from storefront.application.use_cases.products.delete_product import DeleteProductUseCase
from storefront.application.use_cases.products.get_product import GetProductUseCase
from storefront.application.use_cases.products.list_products import ListProductsUseCase
from storefront.application.use_cases.products.update_product import UpdateProductUseCase
from storefront.application.use_cases.users.verify_token import VerifyTokenUseCase
from storefront.domain.products.entities import Product
from storefront.interfaces.http.auth import require_bearer_token
from storefront.interfaces.http.dto.product import (
    PaginationDTO,
    ProductCreateDTO,
    ProductDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
    ProductUpdateDTO,
)
from storefront.shared.errors.validation import raise_validation_error


def _single(message: str, product: Product, status: int = 200) -> tuple[Response, int]:
    payload = ProductResponseDTO(message=message, data=ProductDTO.from_entity(product))
    return jsonify(payload.model_dump(mode="json", by_alias=True)), status


class ProductController:
    def __init__(
        self,
        *,
        verify_token: VerifyTokenUseCase,
        list_use_case: ListProductsUseCase,
        get_use_case: GetProductUseCase,
        create_use_case: CreateProductUseCase,
        update_use_case: UpdateProductUseCase,
        delete_use_case: DeleteProductUseCase,
    ) -> None:
        self._verify_token = verify_token
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def list_products(self) -> tuple[Response, int]:
        page = self._list_use_case.execute(
            page=request.args.get("page"),
            limit=request.args.get("limit"),
        )
        payload = ProductListResponseDTO(
            message="Products retrieved successfully",
            data=[ProductDTO.from_entity(item) for item in page.items],
            pagination=PaginationDTO.from_entity(page.pagination),
        )
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 200

    def get_product(self, product_id: str) -> tuple[Response, int]:
        product = self._get_use_case.execute(product_id)
        return _single("Product retrieved successfully", product)

    def create_product(self) -> tuple[Response, int]:
        try:
            dto = ProductCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        product = self._create_use_case.execute(dto.to_entity())
        return _single("Product created successfully", product, 201)

    def update_product(self, product_id: str) -> tuple[Response, int]:
        try:
            dto = ProductUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        product = self._update_use_case.execute(product_id, dto.changes())
        return _single("Product updated successfully", product)

    def delete_product(self, product_id: str) -> tuple[Response, int]:
        product = self._delete_use_case.execute(product_id)
        return _single("Product deleted successfully", product)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/products")
        bp.before_request(require_bearer_token(self._verify_token))
        bp.add_url_rule("", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_product, methods=["POST"])
        bp.add_url_rule("/<product_id>", view_func=self.get_product, methods=["GET"])
        bp.add_url_rule("/<product_id>", view_func=self.update_product, methods=["PUT"])
        bp.add_url_rule("/<product_id>", view_func=self.delete_product, methods=["DELETE"])
        return bp
