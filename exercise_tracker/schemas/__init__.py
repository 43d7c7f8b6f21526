"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the wire shape; ids serialize under the "_id" key
    - Dates leave the API already rendered as calendar strings

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
