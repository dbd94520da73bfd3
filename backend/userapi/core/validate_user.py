"""User Input Validation: field rules applied before any storage call.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* functions return an error on violation, None on success
    - validate_new_user chains all checks; first error wins
    - No length limit, character set or uniqueness rule on names

Design Decisions:
    - The validated name is the submitted string unchanged; strip() only
      decides whether it is blank
"""

from userapi.core.domain_types import ValidatedName
from userapi.core.errors import UserValidationError
from userapi.core.repository_protocols import NewUserLike

EMPTY_NAME_MESSAGE = "Name must not be empty"


def check_name_not_blank(name: str) -> UserValidationError | None:
    """Rule 1: name must contain something other than whitespace."""
    if not name.strip():
        return UserValidationError(EMPTY_NAME_MESSAGE, field="name")
    return None


def validate_new_user(new_user: NewUserLike) -> ValidatedName:
    """Return the name to persist, or raise the first rule violation."""
    error = check_name_not_blank(new_user.name)
    if error is not None:
        raise error
    return ValidatedName(new_user.name)
