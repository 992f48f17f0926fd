"""Admin category endpoints — create, list view, delete with reject-if-in-use."""

from helpers import create_category


async def test_delete_unused_category(client, seed):
    res = await client.delete(f"/admin/categories/{seed.c.id}")

    assert res.status_code == 200
    assert "message" in res.json()
    names = [c["name"] for c in (await client.get("/categories")).json()]
    assert names == ["A", "B"]


async def test_delete_category_in_use_returns_409(client, seed):
    res = await client.delete(f"/admin/categories/{seed.a.id}")

    assert res.status_code == 409
    assert "error" in res.json()
    detail = (await client.get(f"/posts/{seed.post.id}")).json()
    assert {c["id"] for c in detail["categories"]} == {seed.a.id, seed.b.id}


async def test_delete_category_after_detaching(client, seed):
    await client.put(f"/admin/posts/{seed.post.id}", json={
        "title": "First post", "content": "", "categoryIds": [seed.b.id],
    })

    res = await client.delete(f"/admin/categories/{seed.a.id}")

    assert res.status_code == 200


async def test_delete_missing_category_returns_404(client):
    res = await client.delete("/admin/categories/missing")

    assert res.status_code == 404


async def test_create_category(client):
    res = await client.post("/admin/categories", json={"name": "  News  "})

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "News"
    assert set(body) == {"id", "name", "createdAt"}


async def test_create_duplicate_category_returns_409(client, seed):
    res = await client.post("/admin/categories", json={"name": "A"})

    assert res.status_code == 409


async def test_create_blank_category_returns_400(client):
    res = await client.post("/admin/categories", json={"name": "   "})

    assert res.status_code == 400


async def test_admin_category_list_search_and_pages(client, session_factory):
    for i in range(10):
        await create_category(session_factory, f"Topic {i}")
    await create_category(session_factory, "Other")

    body = (await client.get("/admin/categories", params={"searchTerm": "topic"})).json()
    page2 = (await client.get("/admin/categories", params={"searchTerm": "topic", "page": 2})).json()

    assert body["total"] == 10
    assert body["totalPages"] == 2
    assert len(body["items"]) == 8
    assert len(page2["items"]) == 2
    assert all("topic" in c["name"].lower() for c in body["items"] + page2["items"])
