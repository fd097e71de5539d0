# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors.base import NotFoundError, ValidationError


class ProductNotFoundError(NotFoundError):
    default_code = "product_not_found"
    default_message = "Product not found"


class InvalidProductIdError(ValidationError):
    default_code = "invalid_product_id"
    default_message = "Invalid product ID format"


class NegativePriceError(ValidationError):
    default_message = "Price cannot be negative"


class NegativeStockError(ValidationError):
    default_message = "Stock cannot be negative"
