"""User Sessions & Registrations — sign in, sign out, register.

Invariants:
    - Valid credentials → 303 to root and a session cookie that unlocks item routes
    - Wrong password and unknown email → same 401 INVALID_CREDENTIALS
    - Registration signs the new account in; duplicate email → 409
    - A session naming a deleted user is treated as anonymous
"""

from sqlalchemy import delete

from app.models.user import User
from seed_data import assert_redirect_to


async def test_sign_in_form_renders(client):
    res = await client.get("/users/sign_in")
    assert res.status_code == 200
    names = [f["name"] for f in res.json()["form"]["fields"]]
    assert names == ["email", "password"]


async def test_sign_in_redirects_to_root_and_sets_cookie(client, user1):
    res = await client.post(
        "/users/sign_in",
        json={"user": {"email": "proper@proper.com", "password": "proper123"}},
    )
    assert_redirect_to(res, "/")
    assert "todo_session" in res.cookies


async def test_sign_in_email_is_case_insensitive(client, user1):
    res = await client.post(
        "/users/sign_in",
        json={"email": "  Proper@Proper.com ", "password": "proper123"},
    )
    assert_redirect_to(res, "/")


async def test_wrong_password_is_rejected(client, user1):
    res = await client.post(
        "/users/sign_in",
        json={"user": {"email": "proper@proper.com", "password": "wrong-pass"}},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert_redirect_to(await client.get("/"), "/users/sign_in")


async def test_unknown_email_gets_same_error_as_wrong_password(client):
    res = await client.post(
        "/users/sign_in",
        json={"user": {"email": "nobody@nowhere.com", "password": "whatever"}},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_sign_in_with_malformed_body_is_400(client):
    res = await client.post("/users/sign_in", json={"user": {"email": "x"}})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_register_signs_in_new_user(client):
    res = await client.post(
        "/users",
        json={"user": {"email": "new@new.com", "password": "new12345"}},
    )
    assert_redirect_to(res, "/")

    listing = await client.get("/")
    assert listing.status_code == 200
    assert listing.json()["items"] == []


async def test_register_duplicate_email_conflicts(client, user1):
    res = await client.post(
        "/users",
        json={"user": {"email": "PROPER@proper.com", "password": "another1"}},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_TAKEN"


async def test_session_for_deleted_user_is_anonymous(client, sign_in_as, test_db, user1):
    await sign_in_as("proper@proper.com", "proper123")
    await test_db.execute(delete(User).where(User.id == user1.id))
    await test_db.commit()

    assert_redirect_to(await client.get("/"), "/users/sign_in")


async def test_tampered_cookie_is_anonymous(client, user1):
    client.cookies.set("todo_session", "forged-value")
    assert_redirect_to(await client.get("/items"), "/users/sign_in")
