# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront.domain.products.entities import Product
from storefront.domain.products.exceptions import ProductNotFoundError
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger

from .common import ensure_stock_and_price, parse_product_id

UPDATABLE_FIELDS = frozenset({"name", "description", "price", "category", "stock"})


class UpdateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str | int, changes: Mapping[str, Any]) -> Product:
        pk = parse_product_id(product_id)
        filtered = {
            key: value
            for key, value in changes.items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        ensure_stock_and_price(filtered)

        product = self._products.update(pk, filtered)
        if product is None:
            raise ProductNotFoundError()
        logger.info(f"products.update: ok product_id={pk} fields={sorted(filtered)}")
        return product
