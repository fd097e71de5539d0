# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.products.entities import Product
from storefront.domain.products.exceptions import ProductNotFoundError
from storefront.domain.products.repositories import ProductRepository

from .common import parse_product_id


class GetProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str | int) -> Product:
        product = self._products.find_by_id(parse_product_id(product_id))
        if product is None:
            raise ProductNotFoundError()
        return product
