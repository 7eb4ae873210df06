"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All SQLAlchemy failures surface as core.errors.DatabaseError
"""
