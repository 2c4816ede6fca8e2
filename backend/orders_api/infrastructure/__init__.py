"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports service logic
    - All store calls wrapped with error mapping (SQLAlchemyError → OrderStoreError)

Design Decisions:
    - Repository over raw sessions in services: the service sees only the OrderRepository protocol
"""
