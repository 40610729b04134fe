"""Pydantic Schemas — dependency records exchanged with build-tool integrations.

Invariants:
    - Schemas validate at system boundary (records parsed from JSON)
    - Conversion to core coordinates happens here, never inside core

Design Decisions:
    - Separate from core value objects: schemas are wire contracts, coordinates are domain
"""
