"""Room Finder Application Package: CRUD service for bookable rooms.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
