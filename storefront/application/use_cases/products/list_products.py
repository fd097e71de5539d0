# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.use_cases.products.common import MAX_INT32
from storefront.domain.products.entities import PageRequest, Pagination, ProductPage
from storefront.domain.products.repositories import ProductRepository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _positive_or(value: int | str | None, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if 0 < number <= MAX_INT32 else default


class ListProductsUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, page: int | str | None = None, limit: int | str | None = None) -> ProductPage:
        request = PageRequest(
            page=_positive_or(page, DEFAULT_PAGE),
            limit=_positive_or(limit, DEFAULT_LIMIT),
        )
        items = self._products.list_page(request)
        total = self._products.count()
        return ProductPage(items=items, pagination=Pagination.build(request, total))
