"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Only this layer creates engines or configures handlers
"""
