# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Product:

    id: int
    name: str
    description: str
    price: float
    category: str
    stock: int
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class NewProduct:

    name: str
    description: str
    price: float
    category: str
    stock: int


@dataclass(slots=True, frozen=True)
class PageRequest:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(slots=True, frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @classmethod
    def build(cls, request: PageRequest, total_items: int) -> Pagination:
        return cls(
            current_page=request.page,
            total_pages=math.ceil(total_items / request.limit),
            total_items=total_items,
            items_per_page=request.limit,
        )


@dataclass(slots=True, frozen=True)
class ProductPage:
    items: list[Product]
    pagination: Pagination
