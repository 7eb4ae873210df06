"""Services Layer: orchestration between routes and persistence.

Invariants:
    - Services hold no per-request state
    - Services depend on core Protocols, never on SQLAlchemy directly
"""
