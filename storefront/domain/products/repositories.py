# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .entities import NewProduct, PageRequest, Product


class ProductRepository(Protocol):
    def list_page(self, page: PageRequest) -> list[Product]: ...
    def count(self) -> int: ...
    def find_by_id(self, product_id: int) -> Product | None: ...
    def add(self, product: NewProduct) -> Product: ...
    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product | None: ...
    def delete(self, product_id: int) -> Product | None: ...
