"""User Routes — listing stub and single-record lookup.

Invariants:
    - GET /users always answers 500 (listing is not implemented)
    - GET /users/{user_id}: 0..100 → 200 record, >100 → 404, unparsable → 400
    - user_id is parsed as an unsigned 32-bit integer: ASCII digits with an
      optional leading '+', nothing else (no sign, spaces, underscores, decimals)
    - Handlers only translate between HTTP and core/users; no rules live here
"""

import logging

from fastapi import APIRouter, Path
from fastapi.exceptions import RequestValidationError

from users_api.core.users import (
    USER_ID_UPPER_LIMIT, UserId, fabricate_user, list_users,
)
from users_api.schemas.error import ErrorResponse
from users_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

USER_ID_PATTERN = r"^\+?[0-9]+$"


@router.get(
    "",
    response_model=list[UserResponse],
    responses={500: {"model": ErrorResponse}},
)
async def get_users():
    """List users. Currently a stub that always fails."""
    return [UserResponse.from_record(record) for record in list_users()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_user(
    user_id: str = Path(pattern=USER_ID_PATTERN),
):
    """Fetch a single (fabricated) user record."""
    record = fabricate_user(parse_user_id(user_id))
    logger.debug(f"Fabricated user {record.id}")
    return UserResponse.from_record(record)


def parse_user_id(raw: str) -> UserId:
    """Convert a digits-only path segment, rejecting values beyond u32."""
    value = int(raw)
    if value > USER_ID_UPPER_LIMIT:
        raise RequestValidationError([{
            "type": "less_than_equal",
            "loc": ("path", "user_id"),
            "msg": f"Input should be less than or equal to {USER_ID_UPPER_LIMIT}",
            "input": raw,
        }])
    return UserId(value)
