"""Core: pure domain logic with no IO.

Invariants:
    - Nothing in core/ imports FastAPI, SQLAlchemy or infrastructure/
"""
