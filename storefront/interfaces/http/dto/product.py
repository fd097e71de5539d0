# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from storefront.domain.products.entities import NewProduct, Pagination, Product

_REQUIRED_FIELDS = ("name", "description", "price", "category", "stock")
# column widths in infrastructure/db/models.py
_MAX_LENGTHS = {"name": 255, "category": 128}
_MAX_STOCK = 2**31 - 1


def _coerce_price(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, bool):
        raise PydanticCustomError("price_type", "Price must be a number")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise PydanticCustomError("price_type", "Price must be a number") from None
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise PydanticCustomError("price_type", "Price must be a number")
    return float(value)


def _coerce_stock(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, bool):
        raise PydanticCustomError("stock_type", "Stock must be an integer")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise PydanticCustomError("stock_type", "Stock must be an integer") from None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise PydanticCustomError("stock_type", "Stock must be an integer")
    if value > _MAX_STOCK:
        raise PydanticCustomError("stock_range", "Stock is too large")
    return value


def _clean_text(value: Any, field: str) -> Any:
    if value is None:
        return value
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError(
            "text_invalid",
            "{field} must be a non-empty string",
            {"field": field.capitalize()},
        )
    value = value.strip()
    max_length = _MAX_LENGTHS.get(field)
    if max_length is not None and len(value) > max_length:
        raise PydanticCustomError(
            "text_too_long",
            "{field} must be at most {max_length} characters",
            {"field": field.capitalize(), "max_length": max_length},
        )
    return value


class ProductCreateDTO(BaseModel):
    name: str
    description: str
    price: float
    category: str
    stock: int

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            data = {}
        for field in _REQUIRED_FIELDS:
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise PydanticCustomError(
                    "missing",
                    "Name, description, price, category, and stock are required",
                )
        return data

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def validate_text(cls, value: Any, info: ValidationInfo) -> Any:
        return _clean_text(value, info.field_name)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Any:
        return _coerce_price(value)

    @field_validator("stock", mode="before")
    @classmethod
    def validate_stock(cls, value: Any) -> Any:
        return _coerce_stock(value)

    def to_entity(self) -> NewProduct:
        return NewProduct(
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            stock=self.stock,
        )


class ProductUpdateDTO(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: str | None = None
    stock: int | None = None

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def validate_text(cls, value: Any, info: ValidationInfo) -> Any:
        return _clean_text(value, info.field_name)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Any:
        return _coerce_price(value)

    @field_validator("stock", mode="before")
    @classmethod
    def validate_stock(cls, value: Any) -> Any:
        return _coerce_stock(value)

    def changes(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class ProductDTO(BaseModel):
    id: int
    name: str
    description: str
    price: float
    category: str
    stock: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock=product.stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PaginationDTO(BaseModel):
    current_page: int = Field(serialization_alias="currentPage")
    total_pages: int = Field(serialization_alias="totalPages")
    total_items: int = Field(serialization_alias="totalItems")
    items_per_page: int = Field(serialization_alias="itemsPerPage")

    @classmethod
    def from_entity(cls, pagination: Pagination) -> PaginationDTO:
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            total_items=pagination.total_items,
            items_per_page=pagination.items_per_page,
        )


class ProductResponseDTO(BaseModel):
    message: str
    data: ProductDTO


class ProductListResponseDTO(BaseModel):
    message: str
    data: list[ProductDTO]
    pagination: PaginationDTO
