"""
Tests for shopping list routes.

Verifies:
- list creation with initial items and defaults
- named entries with bad optional values are kept, blank names are dropped
- lists are returned newest first
- only the owner can read or change a list addressed by id
- adding items stamps the list's updated_at
- items can be updated and deleted individually
"""

from datetime import timedelta

from test_fixtures import auth


def _create(client, token="token-alice", user_id="u1", **body):
    r = client.post(
        "/shopping-list/create", headers=auth(token), json={"userId": user_id, **body}
    )
    assert r.status_code == 200
    return r.json()["listId"]


def test_create_list_with_items(client, store):
    list_id = _create(client, name="Weekly", items=[{"name": "Bread"}, {"quantity": 3}])

    r = client.get(f"/shopping-list/{list_id}", headers=auth())
    assert r.status_code == 200
    body = r.json()
    assert body["list"]["name"] == "Weekly"
    assert body["list"]["ownerId"] == "u1"
    (item,) = body["items"]
    assert item["name"] == "Bread"
    assert item["quantity"] == 1
    assert item["unit"] == "item"
    assert item["isChecked"] is False


def test_entries_with_bad_optional_values_are_kept(client, store):
    _create(
        client,
        items=[
            {"name": "Apples", "quantity": "a few", "isChecked": "later"},
            {"name": " "},
        ],
    )
    (item,) = store.docs("shopping_list_items")
    assert item["name"] == "Apples"
    assert item["quantity"] == 1
    assert item["is_checked"] is False


def test_default_list_name(client, store):
    list_id = _create(client)
    assert store.get("shopping_lists", list_id)["name"] == "Shopping List"


def test_lists_newest_first(client, store):
    older = _create(client, name="Old")
    newer = _create(client, name="New")
    lists = store.collections["shopping_lists"]
    lists[older]["created_at"] = lists[newer]["created_at"] - timedelta(days=1)
    _create(client, token="token-bob", user_id="u2", name="Bob's")

    r = client.get("/shopping-lists/u1", headers=auth())
    assert r.status_code == 200
    assert [l["name"] for l in r.json()["lists"]] == ["New", "Old"]


def test_other_users_list_is_403(client):
    list_id = _create(client, token="token-bob", user_id="u2")

    assert client.get(f"/shopping-list/{list_id}", headers=auth()).status_code == 403
    r = client.post(f"/shopping-list/{list_id}/add", headers=auth(), json={"items": [{"name": "x"}]})
    assert r.status_code == 403


def test_missing_list_is_404(client):
    r = client.get("/shopping-list/nope", headers=auth())
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "Shopping list not found"

    r = client.post("/shopping-list/nope/add", headers=auth(), json={"items": []})
    assert r.status_code == 404


def test_add_items_touches_list(client, store):
    list_id = _create(client)
    stamp = store.get("shopping_lists", list_id)["updated_at"]
    store.collections["shopping_lists"][list_id]["updated_at"] = stamp - timedelta(hours=1)

    r = client.post(
        f"/shopping-list/{list_id}/add",
        headers=auth(),
        json={"items": [{"name": "Apples", "quantity": 6}, {"name": ""}]},
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Items added to shopping list"
    assert r.json()["added"] == 1
    assert store.get("shopping_lists", list_id)["updated_at"] >= stamp
    assert store.count("shopping_list_items") == 1


def test_update_and_delete_item(client, store):
    list_id = _create(client, items=[{"name": "Bread"}, {"name": "Butter"}])
    bread = next(i for i in store.docs("shopping_list_items") if i["name"] == "Bread")

    r = client.put(
        f"/shopping-list/{list_id}/item/{bread['id']}", headers=auth(), json={"isChecked": True}
    )
    assert r.status_code == 200
    assert store.get("shopping_list_items", bread["id"])["is_checked"] is True

    r = client.delete(f"/shopping-list/{list_id}/item/{bread['id']}", headers=auth())
    assert r.status_code == 200
    assert [i["name"] for i in store.docs("shopping_list_items")] == ["Butter"]


def test_item_from_another_list_is_404(client, store):
    first = _create(client, items=[{"name": "Bread"}])
    second = _create(client)
    (bread,) = store.docs("shopping_list_items")

    r = client.put(f"/shopping-list/{second}/item/{bread['id']}", headers=auth(), json={"isChecked": True})
    assert r.status_code == 404
    r = client.delete(f"/shopping-list/{second}/item/{bread['id']}", headers=auth())
    assert r.status_code == 404
    assert store.get("shopping_list_items", bread["id"])["list_id"] == first


def test_update_rejects_unknown_fields(client, store):
    list_id = _create(client, items=[{"name": "Bread"}])
    (bread,) = store.docs("shopping_list_items")

    r = client.put(
        f"/shopping-list/{list_id}/item/{bread['id']}", headers=auth(), json={"createdAt": "2020-01-01"}
    )
    assert r.status_code == 400
