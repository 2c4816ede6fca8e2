"""Services Layer — order operations orchestrated over the repository protocol.

Invariants:
    - Services never build SQL; persistence goes through OrderRepository
    - Services raise typed OrdersAPIError subclasses, never HTTPException
"""
