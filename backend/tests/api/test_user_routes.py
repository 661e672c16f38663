"""User Routes — listing stub, id bound, and path parsing failures.

Tests:
    - 0..100 inclusive → 200 {"id", "name"}
    - >100 → 404 {"error": "Data not found"}
    - GET /users → 500 {"error": "internal server error"}
    - Unparsable ids → 400 with a single `error` field
"""

import pytest


@pytest.mark.parametrize("user_id", [0, 1, 5, 50, 100])
async def test_get_user_within_bound(client, user_id):
    res = await client.get(f"/users/{user_id}")
    assert res.status_code == 200
    assert res.json() == {"id": user_id, "name": "user"}


@pytest.mark.parametrize("user_id", [101, 250, 4_294_967_295])
async def test_get_user_above_bound_is_404(client, user_id):
    res = await client.get(f"/users/{user_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Data not found"}


async def test_boundary_is_inclusive(client):
    assert (await client.get("/users/100")).status_code == 200
    assert (await client.get("/users/101")).status_code == 404


async def test_list_users_is_500(client):
    res = await client.get("/users")
    assert res.status_code == 500
    assert res.json() == {"error": "internal server error"}


@pytest.mark.parametrize(
    "raw_id",
    ["abc", "-1", "4294967296", "1.5", "5.0", "1_0", "%205", "5%20", "0x5", "%2B"],
)
async def test_unparsable_id_is_400(client, raw_id):
    res = await client.get(f"/users/{raw_id}")
    assert res.status_code == 400
    body = res.json()
    assert list(body) == ["error"]
    assert body["error"].startswith("Invalid URL")


async def test_success_body_has_no_error_field(client):
    res = await client.get("/users/5")
    assert "error" not in res.json()


@pytest.mark.parametrize(("raw_id", "expected"), [("+5", 5), ("007", 7)])
async def test_id_accepts_plus_sign_and_leading_zeros(client, raw_id, expected):
    res = await client.get(f"/users/{raw_id}")
    assert res.status_code == 200
    assert res.json() == {"id": expected, "name": "user"}


async def test_trailing_slash_is_not_redirected(client):
    res = await client.get("/users/")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}
