"""Order Routes — HTTP surface for the five order operations.

Invariants:
    - Routes never contain business logic: they validate, delegate to OrderService, shape JSON
    - Failures are raised as OrdersAPIError subclasses and rendered by api/error_handlers.py
    - Request bodies validated by Pydantic before reaching the handler (400 on bad payload)

Design Decisions:
    - get_order_service dependency builds the service per request from the request's
      AsyncSession: the store handle is injected, never imported as a global
    - POST for update/search mirrors the body-based contract clients already use
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.domain_types import CanonicalDate
from orders_api.infrastructure.database import get_db
from orders_api.infrastructure.order_repository import SqlAlchemyOrderRepository
from orders_api.schemas.order import (
    MessageResponse, OrderCreate, OrderDeliveryUpdate, OrderLookup,
    OrderResponse, OrderUpdateResponse,
)
from orders_api.services.order_service import OrderService

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderService:
    """FastAPI dependency — OrderService bound to this request's session."""
    return OrderService(SqlAlchemyOrderRepository(db))


@router.post(
    "/create", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate, service: OrderService = Depends(get_order_service),
):
    """Create a new order. 409 if the order_id already exists."""
    await service.create(body.model_dump())
    return MessageResponse(message="Order created successfully.")


@router.post("/update", response_model=OrderUpdateResponse)
async def update_order(
    body: OrderDeliveryUpdate,
    service: OrderService = Depends(get_order_service),
):
    """Update the delivery date of an existing order."""
    order = await service.update_delivery_date(
        body.order_id, CanonicalDate(body.delivery_date),
    )
    return OrderUpdateResponse(
        message="Order updated successfully.",
        order=OrderResponse.model_validate(order),
    )


@router.get("/list", response_model=list[OrderResponse])
async def list_orders(
    date: str = Query(..., min_length=1, description="Order date, loosely Y/M/D"),
    service: OrderService = Depends(get_order_service),
):
    """List all orders whose order_date matches the given day."""
    orders = await service.list_by_date(date)
    return [OrderResponse.model_validate(o) for o in orders]


@router.post("/search", response_model=OrderResponse)
async def search_order(
    body: OrderLookup, service: OrderService = Depends(get_order_service),
):
    """Look up one order by order_id."""
    order = await service.find_by_id(body.order_id)
    return OrderResponse.model_validate(order)


@router.delete("/delete/{order_id}", response_model=MessageResponse)
async def delete_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Permanently delete an order."""
    await service.delete(order_id)
    return MessageResponse(message="Order deleted successfully.")
