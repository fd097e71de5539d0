# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from storefront.domain.products.entities import (
    NewProduct,
    PageRequest,
    Pagination,
    Product,
    ProductPage,
)
from storefront.domain.users.entities import TokenClaims, User

__all__ = [
    "NewProduct",
    "PageRequest",
    "Pagination",
    "Product",
    "ProductPage",
    "TokenClaims",
    "User",
]
