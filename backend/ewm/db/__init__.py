"""Database Layer — SQLAlchemy declarative base.

Invariants:
    - Engine and sessions live in infrastructure/database.py
"""
