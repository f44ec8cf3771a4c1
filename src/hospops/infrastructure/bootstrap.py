"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from hospops.infrastructure.config import Settings, load_settings
from hospops.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")
