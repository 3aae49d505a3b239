"""
Unit tests for services.authenticator.
"""
import pytest

from admin_dashboard.models.user import Role, User
from admin_dashboard.services.authenticator import authenticate


pytestmark = pytest.mark.asyncio


async def test_valid_credentials_return_claims_and_stamp_last_login(store):
    u = await store.create(name="Ada", email="ada@x.com", username="ada", password="secret1")

    claims = await authenticate(store, "ada@x.com", "secret1")

    assert claims is not None
    assert claims.id == str(u.id)
    assert claims.name == "Ada"
    assert claims.email == "ada@x.com"
    assert claims.role == Role.MEMBER
    fresh = await User.get(id=u.id)
    assert fresh.last_login is not None


async def test_email_lookup_ignores_case(store):
    await store.create(name="Ada", email="ada@x.com", username="ada", password="secret1")
    assert await authenticate(store, "ADA@X.COM", "secret1") is not None


async def test_wrong_password_fails(store):
    await store.create(name="Ada", email="ada@x.com", username="ada", password="secret1")
    assert await authenticate(store, "ada@x.com", "secret2") is None


async def test_unknown_email_fails(store):
    assert await authenticate(store, "nobody@x.com", "secret1") is None


async def test_deactivated_user_fails_with_correct_password(store):
    u = await store.create(name="Ada", email="ada@x.com", username="ada", password="secret1")
    await store.deactivate(u.id)

    assert await authenticate(store, "ada@x.com", "secret1") is None
    fresh = await User.get(id=u.id)
    assert fresh.last_login is None


@pytest.mark.parametrize(
    "email,password",
    [("", "secret1"), ("ada@x.com", ""), (None, "secret1"), ("ada@x.com", None), (None, None)],
)
async def test_empty_input_fails(store, email, password):
    await store.create(name="Ada", email="ada@x.com", username="ada", password="secret1")
    assert await authenticate(store, email, password) is None
