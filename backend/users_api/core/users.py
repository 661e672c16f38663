"""User Rules — fabricated user records and the placeholder id guard.

Invariants:
    - UserRecord is synthesized per call, never stored
    - fabricate_user accepts 0..MAX_USER_ID inclusive; anything above is NotFound
    - list_users always fails with InternalServerError (listing not implemented)

Design Decisions:
    - The id guard is an upper bound only. It stands in for an existence check
      against real data; there is no lower bound besides the unsigned id type
"""

from dataclasses import dataclass
from typing import NewType

from users_api.core.errors import InternalServerError, NotFoundError


UserId = NewType("UserId", int)   # unsigned 32-bit

USER_ID_UPPER_LIMIT = 4_294_967_295
MAX_USER_ID = 100
DEFAULT_USER_NAME = "user"


@dataclass(frozen=True)
class UserRecord:
    id: UserId
    name: str = DEFAULT_USER_NAME


def fabricate_user(user_id: UserId) -> UserRecord:
    """Build the record for user_id, or raise NotFoundError above MAX_USER_ID."""
    if user_id > MAX_USER_ID:
        raise NotFoundError()
    return UserRecord(id=user_id)


def list_users() -> list[UserRecord]:
    # TODO: return real records once a user store exists
    raise InternalServerError()
