"""Services Layer — user and exercise handlers.

Invariants:
    - Handlers depend on repository protocols, never on SQLAlchemy directly
    - Every handler method maps to exactly one HTTP operation

Design Decisions:
    - One handler file per resource for locality (ADR: no god objects)
"""
