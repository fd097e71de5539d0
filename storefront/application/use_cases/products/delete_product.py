# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.products.entities import Product
from storefront.domain.products.exceptions import ProductNotFoundError
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger

from .common import parse_product_id


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str | int) -> Product:
        pk = parse_product_id(product_id)
        product = self._products.delete(pk)
        if product is None:
            raise ProductNotFoundError()
        logger.info(f"products.delete: ok product_id={pk}")
        return product
