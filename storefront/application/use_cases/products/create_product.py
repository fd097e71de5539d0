# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import asdict

from storefront.domain.products.entities import NewProduct, Product
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger

from .common import ensure_stock_and_price


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product: NewProduct) -> Product:
        ensure_stock_and_price(asdict(product))
        persisted = self._products.add(product)
        logger.info(f"products.create: ok product_id={persisted.id}")
        return persisted
