# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from storefront.domain.products.exceptions import (
    InvalidProductIdError,
    NegativePriceError,
    NegativeStockError,
)

_ID_RE = re.compile(r"[0-9]{1,10}")
MAX_INT32 = 2**31 - 1


def parse_product_id(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise InvalidProductIdError(context={"id": str(raw)})
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _ID_RE.fullmatch(raw):
        value = int(raw)
    else:
        raise InvalidProductIdError(context={"id": str(raw)})
    if not 0 < value <= MAX_INT32:
        raise InvalidProductIdError(context={"id": str(raw)})
    return value


def ensure_stock_and_price(fields: Mapping[str, Any]) -> None:
    price = fields.get("price")
    if price is not None and price < 0:
        raise NegativePriceError()
    stock = fields.get("stock")
    if stock is not None and stock < 0:
        raise NegativeStockError()
