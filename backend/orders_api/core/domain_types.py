"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - OrderId wraps the externally supplied order identifier (never generated here)
    - CanonicalDate is always the 10-char YYYY/MM/DD form produced by normalize_date
    - All store operations encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)


# ─── Value Types ─────────────────────────────────────────────────

CanonicalDate = NewType("CanonicalDate", str)   # YYYY/MM/DD


# ─── Enums ───────────────────────────────────────────────────────

class OrderOperation(str, Enum):
    """The five order operations — used in error context and logs."""
    CREATE = "create"
    UPDATE = "update"
    LIST = "list"
    SEARCH = "search"
    DELETE = "delete"
