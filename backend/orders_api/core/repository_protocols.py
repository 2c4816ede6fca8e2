"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Order persistence accessed through the OrderRepository Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass a plain fake
    - Async in Protocol: every store call is an await point in the implementation
"""

from typing import Protocol

from orders_api.core.domain_types import CanonicalDate, OrderId


class OrderLike(Protocol):
    """Structural contract for Order records returned by a repository.

    Avoids coupling the service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    order_id: str
    item_name: str
    cost: float
    order_date: str
    delivery_date: str


class OrderRepository(Protocol):
    """Contract for order persistence — implemented by shell.

    add() must raise DuplicateOrderError when the store rejects the
    order_id as already present; every other store failure is raised
    as OrderStoreError.
    """
    async def get(self, order_id: OrderId) -> OrderLike | None: ...
    async def add(self, order_data: dict) -> OrderLike: ...
    async def update_delivery_date(
        self, order_id: OrderId, delivery_date: CanonicalDate,
    ) -> OrderLike | None: ...
    async def find_by_order_date(
        self, date_fragment: CanonicalDate,
    ) -> list[OrderLike]: ...
    async def delete(self, order_id: OrderId) -> int: ...
