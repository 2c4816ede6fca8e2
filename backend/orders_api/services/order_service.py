"""Order Service — create, update, search, list-by-date and delete for order records.

Invariants:
    - Each operation maps every failure to exactly one kind before returning:
      DuplicateOrderError (409), OrderNotFoundError (404), InvalidDateError (400),
      OrderStoreError (500)
    - Create: existence pre-check is an early exit only; the store's uniqueness
      violation (raised by the repository as DuplicateOrderError) is the source of truth
    - Update touches delivery_date only; order_date is never written after insert
    - No retries, no locking: one request = one store interaction (create = two)

Design Decisions:
    - Repository injected (OrderRepository protocol): routes build the SQLAlchemy one,
      tests pass in-memory fakes
    - _store_boundary() context manager over try/except in every method: one mapping
      point for driver errors, logged server-side with full detail
"""

import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError

from orders_api.core.domain_types import CanonicalDate, OrderId, OrderOperation
from orders_api.core.errors import (
    DuplicateOrderError, OrderNotFoundError, OrderStoreError,
)
from orders_api.core.normalize_date import normalize_date
from orders_api.core.repository_protocols import OrderLike, OrderRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_boundary(operation: OrderOperation, order_id: str | None = None):
    """Map store/driver failures raised inside the block to OrderStoreError."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            f"Order {operation.value} failed: {e}",
            extra={"order_id": order_id, "operation": operation.value},
            exc_info=True,
        )
        raise OrderStoreError(operation.value, order_id) from e


class OrderService:
    """The five order operations over an injected repository."""

    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def create(self, order_data: dict) -> OrderLike:
        """Persist a new order. Raises DuplicateOrderError if order_id is taken."""
        order_id = OrderId(order_data["order_id"])
        async with _store_boundary(OrderOperation.CREATE, order_id):
            if await self.repository.get(order_id) is not None:
                logger.warning(
                    f"Duplicate order {order_id} rejected",
                    extra={"order_id": order_id, "operation": "create"},
                )
                raise DuplicateOrderError(order_id)
            order = await self.repository.add(order_data)
        logger.info(
            f"Order {order_id} created",
            extra={"order_id": order_id, "operation": "create"},
        )
        return order

    async def update_delivery_date(
        self, order_id: str, delivery_date: CanonicalDate,
    ) -> OrderLike:
        async with _store_boundary(OrderOperation.UPDATE, order_id):
            order = await self.repository.update_delivery_date(
                OrderId(order_id), delivery_date,
            )
        if order is None:
            raise OrderNotFoundError(order_id)
        logger.info(
            f"Order {order_id} delivery date set to {delivery_date}",
            extra={"order_id": order_id, "operation": "update"},
        )
        return order

    async def find_by_id(self, order_id: str) -> OrderLike:
        async with _store_boundary(OrderOperation.SEARCH, order_id):
            order = await self.repository.get(OrderId(order_id))
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def list_by_date(self, raw_date: str) -> list[OrderLike]:
        """All orders whose order_date contains the normalized date.

        Raises InvalidDateError before touching the store when raw_date
        cannot be normalized. Result order is whatever the store returns.
        """
        fragment = normalize_date(raw_date)
        async with _store_boundary(OrderOperation.LIST):
            orders = await self.repository.find_by_order_date(fragment)
        logger.info(
            f"Listed {len(orders)} order(s) for {fragment}",
            extra={"operation": "list", "count": len(orders)},
        )
        return orders

    async def delete(self, order_id: str) -> None:
        async with _store_boundary(OrderOperation.DELETE, order_id):
            removed = await self.repository.delete(OrderId(order_id))
        if removed == 0:
            raise OrderNotFoundError(order_id)
        logger.info(
            f"Order {order_id} deleted",
            extra={"order_id": order_id, "operation": "delete"},
        )
