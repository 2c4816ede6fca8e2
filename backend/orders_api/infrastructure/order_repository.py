"""Order Repository — SQLAlchemy implementation of the OrderRepository protocol.

Invariants:
    - One AsyncSession per repository instance (one per request)
    - add() translates the store's uniqueness violation into DuplicateOrderError
    - Every failed write rolls the session back before the error leaves this module
    - find_by_order_date() is a textual substring match (LIKE %fragment%), never a range query

Design Decisions:
    - Uniqueness enforced by the primary key, not by the pre-check: concurrent creates that
      both pass the pre-check still resolve to exactly one row and one DuplicateOrderError
    - delete() returns the affected row count so the caller decides NotFound
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.domain_types import CanonicalDate, OrderId
from orders_api.core.errors import DuplicateOrderError
from orders_api.models.order import Order

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository:
    """Order persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, order_id: OrderId) -> Order | None:
        result = await self.db.execute(
            select(Order).where(Order.order_id == order_id),
        )
        return result.scalar_one_or_none()

    async def add(self, order_data: dict) -> Order:
        """Insert a new order. Raises DuplicateOrderError on a taken order_id.

        An IntegrityError is only reported as a duplicate when a row with
        the same order_id is visible after rollback; any other constraint
        failure (e.g. a NOT NULL column) propagates unchanged.
        """
        order_id = order_data.get("order_id")
        order = Order(**order_data)
        self.db.add(order)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if order_id is not None and await self.get(order_id) is not None:
                logger.warning(
                    f"Uniqueness violation on insert: {e.orig}",
                    extra={"order_id": order_id, "operation": "create"},
                )
                raise DuplicateOrderError(order_id) from e
            raise
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(order)
        return order

    async def update_delivery_date(
        self, order_id: OrderId, delivery_date: CanonicalDate,
    ) -> Order | None:
        """Set delivery_date in place. Returns None when no such order."""
        order = await self.get(order_id)
        if order is None:
            return None
        order.delivery_date = delivery_date
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(order)
        return order

    async def find_by_order_date(
        self, date_fragment: CanonicalDate,
    ) -> list[Order]:
        result = await self.db.execute(
            select(Order).where(
                Order.order_date.contains(date_fragment, autoescape=True),
            ),
        )
        return list(result.scalars().all())

    async def delete(self, order_id: OrderId) -> int:
        """Delete by order_id. Returns the number of rows removed (0 or 1)."""
        try:
            result = await self.db.execute(
                delete(Order).where(Order.order_id == order_id),
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return result.rowcount
