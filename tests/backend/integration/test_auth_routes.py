import pytest

from admin_dashboard.core.security import create_access_token


pytestmark = pytest.mark.asyncio

GENERIC_FAILURE = {"code": "AUTH_INVALID_CREDENTIALS", "message": "Invalid email or password"}


async def login_user(client, email: str, password: str):
    return await client.post(
        "/api/v1/auth/login",
        json={"email": email, "password": password},
    )


async def test_login_flow(client, create_member):
    member, password = await create_member()

    resp = await login_user(client, member.email, password)
    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["user"] == {
        "id": str(member.id),
        "name": member.name,
        "email": member.email,
        "role": "member",
    }
    assert "accessToken" in body["data"]
    assert "accessToken" in resp.cookies


async def test_login_failures_are_indistinguishable(client, create_member, store):
    member, password = await create_member()
    other, other_password = await create_member()
    await store.deactivate(other.id)

    wrong_password = await login_user(client, member.email, "wrong-password")
    unknown_email = await login_user(client, "nobody@example.com", password)
    deactivated = await login_user(client, other.email, other_password)
    empty = await login_user(client, "", "")

    for resp in (wrong_password, unknown_email, deactivated, empty):
        assert resp.status_code == 401
        assert resp.json()["detail"] == GENERIC_FAILURE
        assert "accessToken" not in resp.cookies


@pytest.mark.parametrize(
    "body",
    [
        {"email": None, "password": None},
        {"email": "nobody@example.com", "password": None},
        {"email": None, "password": "secret1"},
        {},
    ],
)
async def test_login_null_or_missing_fields_get_generic_failure(client, body):
    resp = await client.post("/api/v1/auth/login", json=body)
    assert resp.status_code == 401
    assert resp.json()["detail"] == GENERIC_FAILURE


async def test_me_with_header_and_cookie(client, create_admin, auth_header_factory):
    admin, password = await create_admin()

    headers = await auth_header_factory(admin.email, password)
    me_resp = await client.get("/api/v1/auth/me", headers=headers)
    assert me_resp.status_code == 200
    assert me_resp.json()["data"]["role"] == "admin"

    # Cookie set by login is enough on its own
    await login_user(client, admin.email, password)
    cookie_resp = await client.get("/api/v1/auth/me")
    assert cookie_resp.status_code == 200
    assert cookie_resp.json()["data"]["email"] == admin.email


async def test_logout_clears_cookie(client, create_member):
    member, password = await create_member()
    await login_user(client, member.email, password)
    assert (await client.get("/api/v1/auth/me")).status_code == 200

    logout_resp = await client.post("/api/v1/auth/logout")
    assert logout_resp.status_code == 200
    assert logout_resp.json()["success"] is True

    after = await client.get("/api/v1/auth/me")
    assert after.status_code == 401


async def test_auth_requires_token(client):
    unauth_me = await client.get("/api/v1/auth/me")
    assert unauth_me.status_code == 401
    assert unauth_me.json()["detail"] == "AUTH_REQUIRED"


async def test_invalid_tokens_are_rejected(client):
    garbage = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert garbage.status_code == 401
    assert garbage.json()["detail"] == "AUTH_INVALID_TOKEN"

    # Correctly signed but carrying a role outside admin/member
    odd_role = create_access_token("some-id", "Eve", "eve@x.com", "superuser")
    resp = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {odd_role}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "AUTH_INVALID_TOKEN"
