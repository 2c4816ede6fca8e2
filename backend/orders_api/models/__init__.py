"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata before create_all runs
"""

from orders_api.models.order import Order  # noqa: F401
