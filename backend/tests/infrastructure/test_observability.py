"""Structured logging — JSON formatter fields and setup idempotency."""

import json
import logging

from orders_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "orders_api.test", logging.INFO, __file__, 1, "Order %s created", ("A1",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "orders_api.test"
    assert out["message"] == "Order A1 created"
    assert "timestamp" in out


def test_json_formatter_surfaces_order_extras():
    out = json.loads(JSONFormatter().format(
        _record(order_id="A1", operation="create", error_code="DUPLICATE_ORDER"),
    ))
    assert out["order_id"] == "A1"
    assert out["operation"] == "create"
    assert out["error_code"] == "DUPLICATE_ORDER"
    assert "path" not in out


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in logging.root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for handler in logging.root.handlers[:]:
            if handler not in before:
                logging.root.removeHandler(handler)
