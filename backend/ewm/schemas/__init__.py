"""Schemas — Pydantic request/response models shared by the backend and the gateway.

Invariants:
    - No schema module imports ORM models or database code (gateway imports these)
    - Wire names are camelCase; Python attribute names are snake_case

Design Decisions:
    - One module per resource, mirroring models/
"""
