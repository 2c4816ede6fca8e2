"""Domain Types — verifies identity wrappers and operation enum values."""

from orders_api.core.domain_types import CanonicalDate, OrderId, OrderOperation


def test_identity_types_wrap_str():
    assert OrderId("A1") == "A1"
    assert CanonicalDate("2023/05/01") == "2023/05/01"


def test_order_operation_has_five_members():
    assert {op.value for op in OrderOperation} == {
        "create", "update", "list", "search", "delete",
    }
