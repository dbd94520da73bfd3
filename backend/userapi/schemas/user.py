"""User Schemas: Pydantic wire contracts for the /users endpoints.

Invariants:
    - NewUser carries only `name`; unknown body fields are ignored
    - NewUser does not strip or reject blank names; that rule lives in
      core/validate_user.py so its message reaches the client verbatim
    - UserResponse is always {id, name}
"""

from pydantic import BaseModel, ConfigDict


class NewUser(BaseModel):
    """User creation input."""
    name: str


class UserResponse(BaseModel):
    """User response: public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
