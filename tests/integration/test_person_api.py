import pytest


@pytest.mark.asyncio
async def test_person_crud(client):
    resp = await client.post(
        "/api/person/v1",
        json={"first_name": "Ada", "last_name": "Lovelace", "address": "London", "gender": "Female"},
    )
    assert resp.status_code == 200, resp.text
    person = resp.json()
    person_id = person["id"]
    assert person["links"][0]["href"] == f"http://test/api/person/v1/{person_id}"

    resp = await client.put(
        "/api/person/v1",
        json={"id": person_id, "first_name": "Ada", "last_name": "King"},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["last_name"] == "King"
    assert resp.json()["address"] is None

    resp = await client.delete(f"/api/person/v1/{person_id}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/person/v1/{person_id}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_person_paged_search_by_name(client):
    for first, last in [("Ada", "Lovelace"), ("Alan", "Turing"), ("Grace", "Hopper")]:
        await client.post("/api/person/v1", json={"first_name": first, "last_name": last})

    resp = await client.get("/api/person/v1/asc/10/1", params={"name": "a"})
    assert resp.status_code == 200, resp.text
    page = resp.json()
    # "a" matches every first or last name above
    assert page["total_results"] == 3
    assert [p["first_name"] for p in page["items"]] == ["Ada", "Alan", "Grace"]

    resp = await client.get("/api/person/v1/asc/10/1", params={"name": "hop"})
    assert [p["last_name"] for p in resp.json()["items"]] == ["Hopper"]


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_person_out_of_range_values_return_400(client):
    resp = await client.get("/api/person/v1/99999999999999999999")
    assert resp.status_code == 400, resp.text

    resp = await client.delete("/api/person/v1/99999999999999999999")
    assert resp.status_code == 400, resp.text

    resp = await client.get("/api/person/v1/asc/10/99999999999999999999")
    assert resp.status_code == 400, resp.text


@pytest.mark.asyncio
async def test_person_search_underscore_is_literal(client):
    for first, last in [("Jo_Ann", "Smith"), ("JoxAnn", "Smith")]:
        await client.post("/api/person/v1", json={"first_name": first, "last_name": last})

    resp = await client.get("/api/person/v1/asc/10/1", params={"name": "o_a"})
    assert resp.status_code == 200, resp.text
    assert [p["first_name"] for p in resp.json()["items"]] == ["Jo_Ann"]
