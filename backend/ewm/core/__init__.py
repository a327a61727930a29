"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock passed in)

Design Decisions:
    - Functional core separated from imperative shell: services load entities,
      core decides, services persist
"""
