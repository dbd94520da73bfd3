"""Users Routes: list, fetch and create users.

Invariants:
    - Each handler composes validation -> UserGateway -> response; failures are
      raised as UserApiError and rendered by api/error_handlers.py
    - {user_id} only matches 1-18 ASCII digits; anything else is an unmatched route
    - An empty list is a normal 200 with []
    - Validation runs before any storage call on create
"""

from fastapi import APIRouter, Depends, status
from starlette.convertors import Convertor, register_url_convertor

from userapi.core.domain_types import UserId
from userapi.core.errors import UserNotFoundError
from userapi.core.repository_protocols import UserGateway
from userapi.core.validate_user import validate_new_user
from userapi.repositories.user_repository import get_user_repository
from userapi.schemas.user import NewUser, UserResponse


class UserIdConvertor(Convertor):
    """Path segment convertor: at most 18 digits always fits a 64-bit key."""
    regex = "[0-9]{1,18}"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(value)


register_url_convertor("user_id", UserIdConvertor())

router = APIRouter(prefix="/users", tags=["User Service"])


def _error_example(message: str) -> dict:
    return {"content": {"application/json": {"example": {"error": message}}}}


@router.get(
    "", response_model=list[UserResponse], description="Get all users",
)
async def list_users(users: UserGateway = Depends(get_user_repository)):
    return await users.list_users()


@router.get(
    "/{user_id:user_id}",
    response_model=UserResponse,
    responses={status.HTTP_404_NOT_FOUND: _error_example("Not found")},
    description="Get a user by ID",
)
async def get_user(
    user_id: int, users: UserGateway = Depends(get_user_repository),
):
    user = await users.get_user(UserId(user_id))
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: _error_example("Name must not be empty")},
    description="Create a new user",
)
async def create_user(
    body: NewUser, users: UserGateway = Depends(get_user_repository),
):
    name = validate_new_user(body)
    return await users.insert_user(name)
