"""User Schemas — public shape of a fabricated user record.

Invariants:
    - id is unsigned (ge=0)
    - Built only from core UserRecord, never from raw request data
"""

from pydantic import BaseModel, Field

from users_api.core.users import USER_ID_UPPER_LIMIT, UserRecord


class UserResponse(BaseModel):
    """User record as returned by GET /users/{id}."""
    id: int = Field(ge=0, le=USER_ID_UPPER_LIMIT)
    name: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(id=record.id, name=record.name)
