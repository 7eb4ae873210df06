"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate types at the system boundary; required-field rules live in core
    - JSON uses camelCase names; snake_case is accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
