"""Items (signed out) — every item route redirects anonymous requests to sign-in.

Invariants:
    - list/new/create/edit/update/delete → 303 to /users/sign_in
    - No store mutation for create/update/delete
    - Authentication is decided before the body is validated
"""

from seed_data import assert_redirect_to, create_item, create_user

SIGN_IN = "/users/sign_in"


async def test_get_items_redirects_to_sign_in(client):
    assert_redirect_to(await client.get("/items"), SIGN_IN)


async def test_get_root_redirects_to_sign_in(client):
    assert_redirect_to(await client.get("/"), SIGN_IN)


async def test_get_new_item_form_redirects_to_sign_in(client):
    assert_redirect_to(await client.get("/items/new"), SIGN_IN)


async def test_post_items_creates_nothing(client, count_items):
    res = await client.post("/items", json={"item": {"text": "walk the dog"}})

    assert_redirect_to(res, SIGN_IN)
    assert await count_items() == 0


async def test_post_items_with_invalid_body_still_redirects(client, count_items):
    res = await client.post("/items", content=b"garbage")

    assert_redirect_to(res, SIGN_IN)
    assert await count_items() == 0


async def test_get_edit_form_redirects_to_sign_in(client, user1_item):
    assert_redirect_to(await client.get(f"/items/{user1_item.id}/edit"), SIGN_IN)


async def test_get_edit_form_for_malformed_id_redirects_to_sign_in(client):
    assert_redirect_to(await client.get("/items/whatever/edit"), SIGN_IN)


async def test_patch_item_leaves_text_unchanged(client, test_db, reload_item):
    """Anonymous PATCH "take out the trash" on "walk the dog"."""
    user = await create_user(test_db, "bob@bob.com", "bobbob")
    item = await create_item(test_db, user, "walk the dog")

    res = await client.patch(
        f"/items/{item.id}", json={"item": {"text": "take out the trash"}},
    )

    assert_redirect_to(res, SIGN_IN)
    assert (await reload_item(item.id)).text == "walk the dog"


async def test_delete_item_deletes_nothing(client, test_db, count_items, reload_item):
    user = await create_user(test_db, "mary@mary.com", "marymary")
    item = await create_item(test_db, user, "delete me")
    before = await count_items()

    res = await client.delete(f"/items/{item.id}")

    assert_redirect_to(res, SIGN_IN)
    assert await count_items() == before
    assert await reload_item(item.id) is not None


async def test_signing_out_locks_items_again(client, sign_in_as, user1, user1_item):
    await sign_in_as("proper@proper.com", "proper123")
    assert (await client.get("/")).status_code == 200

    res = await client.delete("/users/sign_out")

    assert_redirect_to(res, SIGN_IN)
    assert_redirect_to(await client.get("/"), SIGN_IN)
