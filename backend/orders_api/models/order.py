"""Order ORM — persists the sole entity of the orders service.

Invariants:
    - order_id is the primary key: the store itself rejects a second row with the same id
    - order_date / delivery_date hold canonical YYYY/MM/DD text (see core/normalize_date.py)
    - order_date is written once at insert; only delivery_date is ever updated
    - All business columns are non-nullable

Design Decisions:
    - Dates as String(10) over Date: ListByDate is a textual substring match, so the stored
      value must be the same text shape as the normalized search fragment
    - Float for cost: JSON responses carry a number, not a Decimal string
"""

from datetime import datetime, timezone

from sqlalchemy import String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from orders_api.db.base import Base


class Order(Base):
    """A purchase record keyed by its externally supplied order_id."""
    __tablename__ = "orders"

    order_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    order_date: Mapped[str] = mapped_column(
        String(10), nullable=False, index=True,
    )
    delivery_date: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
