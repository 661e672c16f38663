"""User Rules — fabricated records and the upper-bound id guard."""

import pytest

from users_api.core.errors import InternalServerError, NotFoundError
from users_api.core.users import (
    MAX_USER_ID, UserId, UserRecord, fabricate_user, list_users,
)


@pytest.mark.parametrize("user_id", [0, 1, 5, 99, MAX_USER_ID])
def test_fabricate_user_within_bound(user_id):
    record = fabricate_user(UserId(user_id))
    assert record == UserRecord(id=user_id, name="user")


@pytest.mark.parametrize("user_id", [MAX_USER_ID + 1, 1000, 4_294_967_295])
def test_fabricate_user_above_bound_is_not_found(user_id):
    with pytest.raises(NotFoundError):
        fabricate_user(UserId(user_id))


def test_max_user_id_is_one_hundred():
    assert MAX_USER_ID == 100


def test_record_is_frozen():
    record = fabricate_user(UserId(3))
    with pytest.raises(AttributeError):
        record.name = "other"


def test_list_users_always_fails():
    with pytest.raises(InternalServerError):
        list_users()
