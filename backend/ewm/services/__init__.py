"""Services Layer — imperative shell: load entities, apply core rules, persist.

Invariants:
    - Each service class takes an AsyncSession and owns one API area
    - Services return schemas, never ORM objects
    - Business rules live in core/; services only call them

Design Decisions:
    - Entity lookups and DTO mapping shared via lookups.py and mappers.py
"""
