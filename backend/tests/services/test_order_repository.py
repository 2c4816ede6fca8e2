"""Order repository — SQLAlchemy store behavior against in-memory SQLite.

Invariants:
    - A second insert of the same order_id raises DuplicateOrderError (primary key is the truth)
    - Non-uniqueness integrity failures are not reported as duplicates
    - find_by_order_date is a substring match on the stored text
    - delete returns the number of removed rows
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from orders_api.core.errors import DuplicateOrderError
from orders_api.infrastructure.order_repository import SqlAlchemyOrderRepository
from orders_api.models.order import Order


def _order(order_id="A1", order_date="2023/05/01", **overrides):
    data = {
        "order_id": order_id,
        "item_name": "Widget",
        "cost": 9.99,
        "order_date": order_date,
        "delivery_date": "2023/05/10",
    }
    data.update(overrides)
    return data


async def test_add_then_get(test_session_factory):
    async with test_session_factory() as db:
        repo = SqlAlchemyOrderRepository(db)
        created = await repo.add(_order())
        assert created.order_id == "A1"
        assert created.created_at is not None

    async with test_session_factory() as db:
        found = await SqlAlchemyOrderRepository(db).get("A1")
        assert found is not None
        assert found.item_name == "Widget"
        assert found.order_date == "2023/05/01"


async def test_get_missing_returns_none(test_db):
    assert await SqlAlchemyOrderRepository(test_db).get("nope") is None


async def test_second_insert_same_id_is_duplicate(test_session_factory):
    """Two requests racing past the pre-check: the store's key decides."""
    async with test_session_factory() as db:
        await SqlAlchemyOrderRepository(db).add(_order())

    async with test_session_factory() as db:
        with pytest.raises(DuplicateOrderError) as exc_info:
            await SqlAlchemyOrderRepository(db).add(_order(item_name="Other"))
        assert exc_info.value.order_id == "A1"

    async with test_session_factory() as db:
        rows = (await db.execute(select(Order))).scalars().all()
        assert len(rows) == 1
        assert rows[0].item_name == "Widget"


async def test_null_column_is_not_reported_as_duplicate(test_db):
    with pytest.raises(IntegrityError):
        await SqlAlchemyOrderRepository(test_db).add(_order(item_name=None))


async def test_update_delivery_date(test_session_factory):
    async with test_session_factory() as db:
        await SqlAlchemyOrderRepository(db).add(_order())

    async with test_session_factory() as db:
        updated = await SqlAlchemyOrderRepository(db).update_delivery_date(
            "A1", "2023/05/12",
        )
        assert updated.delivery_date == "2023/05/12"
        assert updated.order_date == "2023/05/01"

    async with test_session_factory() as db:
        found = await SqlAlchemyOrderRepository(db).get("A1")
        assert found.delivery_date == "2023/05/12"


async def test_update_missing_returns_none(test_db):
    repo = SqlAlchemyOrderRepository(test_db)
    assert await repo.update_delivery_date("nope", "2023/05/12") is None


async def test_find_by_order_date_substring(test_session_factory):
    async with test_session_factory() as db:
        repo = SqlAlchemyOrderRepository(db)
        await repo.add(_order("A1", "2023/05/01"))
        await repo.add(_order("A2", "2023/05/01"))
        await repo.add(_order("B1", "2023/05/02"))
        await repo.add(_order("C1", "2024/05/01"))

    async with test_session_factory() as db:
        repo = SqlAlchemyOrderRepository(db)
        day = await repo.find_by_order_date("2023/05/01")
        assert {o.order_id for o in day} == {"A1", "A2"}
        month = await repo.find_by_order_date("2023/05")
        assert {o.order_id for o in month} == {"A1", "A2", "B1"}
        assert await repo.find_by_order_date("1999/01/01") == []


async def test_delete_returns_rowcount(test_session_factory):
    async with test_session_factory() as db:
        await SqlAlchemyOrderRepository(db).add(_order())

    async with test_session_factory() as db:
        repo = SqlAlchemyOrderRepository(db)
        assert await repo.delete("A1") == 1
        assert await repo.delete("A1") == 0
        assert await repo.get("A1") is None
