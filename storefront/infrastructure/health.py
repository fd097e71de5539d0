# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from storefront.infrastructure.db import ENGINE
from storefront.infrastructure.db.models import Product, User
from storefront.shared.logging import logger

_TABLES = (User, Product)


def check_tables() -> dict[str, str]:
    """Touch each catalog table; maps table name to ``ok`` or ``unreachable``."""
    report: dict[str, str] = {}
    with ENGINE.connect() as connection:
        for model in _TABLES:
            name = model.__tablename__
            try:
                connection.execute(select(func.count()).select_from(model.__table__))
            except SQLAlchemyError as exc:
                logger.warning(f"health: table {name} unreachable: {type(exc).__name__}")
                connection.rollback()
                report[name] = "unreachable"
            else:
                report[name] = "ok"
    return report


__all__ = ["check_tables"]
