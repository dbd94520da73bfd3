"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned integer key, immutable once created
    - ValidatedName is only ever produced by core/validate_user.py
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Value Types ─────────────────────────────────────────────────

ValidatedName = NewType("ValidatedName", str)   # non-blank after strip()
