"""HTTP contract tests for the /cats endpoints."""

import pytest
from httpx import AsyncClient


async def _count(client: AsyncClient) -> int:
    response = await client.get("/cats")
    assert response.status_code == 200
    return len(response.json())


@pytest.mark.asyncio
async def test_list_is_empty_initially(client: AsyncClient):
    response = await client.get("/cats")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_valid_cat(client: AsyncClient):
    response = await client.post(
        "/cats",
        json={"cat": {"name": "Felix", "age": 2, "notes": "Walks in the park"}},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["name"] == "Felix"
    assert body["age"] == 2
    assert body["notes"] == "Walks in the park"
    assert body["created_at"]
    assert body["updated_at"]

    listed = (await client.get("/cats")).json()
    assert [(c["id"], c["name"], c["age"]) for c in listed] == [(1, "Felix", 2)]


@pytest.mark.asyncio
async def test_missing_name_is_rejected_and_nothing_stored(client: AsyncClient):
    response = await client.post(
        "/cats",
        json={"cat": {"age": 4, "notes": "Meow Mix, and plenty of sunshine."}},
    )

    assert response.status_code == 422
    assert response.json() == {"name": ["can't be blank"]}
    assert await _count(client) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "age, message",
    [
        (None, "can't be blank"),
        ("", "can't be blank"),
        ("four", "is not a number"),
        (2.5, "must be an integer"),
        (True, "is not a number"),
    ],
)
async def test_bad_age_is_rejected(client: AsyncClient, age, message):
    response = await client.post("/cats", json={"cat": {"name": "Tom", "age": age}})

    assert response.status_code == 422
    assert response.json() == {"age": [message]}
    assert await _count(client) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("age", [10**30, "99999999999999999999", 1e30, -1, 101])
async def test_out_of_range_age_is_a_field_error(client: AsyncClient, age):
    response = await client.post("/cats", json={"cat": {"name": "Tom", "age": age}})

    assert response.status_code == 422
    body = response.json()
    assert list(body) == ["age"]
    assert len(body["age"]) == 1
    assert await _count(client) == 0


@pytest.mark.asyncio
async def test_age_bounds_are_accepted(client: AsyncClient):
    for age in (0, 100):
        response = await client.post("/cats", json={"cat": {"name": "Tom", "age": age}})
        assert response.status_code == 201
        assert response.json()["age"] == age


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "age, message",
    [
        ("1e3", "is not a number"),
        (1000.0, "must be less than or equal to 100"),
        (1000, "must be less than or equal to 100"),
    ],
)
async def test_large_ages_are_rejected_whatever_their_spelling(
    client: AsyncClient, age, message
):
    response = await client.post("/cats", json={"cat": {"name": "Tom", "age": age}})

    assert response.status_code == 422
    assert response.json() == {"age": [message]}
    assert await _count(client) == 0


@pytest.mark.asyncio
async def test_missing_age_key_is_rejected(client: AsyncClient):
    response = await client.post("/cats", json={"cat": {"name": "Tom"}})

    assert response.status_code == 422
    assert response.json()["age"] == ["can't be blank"]


@pytest.mark.asyncio
async def test_short_notes_are_rejected(client: AsyncClient):
    response = await client.post(
        "/cats", json={"cat": {"name": "Tom", "age": 3, "notes": "short"}}
    )

    assert response.status_code == 422
    assert response.json() == {"notes": ["is too short (minimum is 10 characters)"]}
    assert await _count(client) == 0


@pytest.mark.asyncio
async def test_notes_may_be_omitted(client: AsyncClient):
    response = await client.post("/cats", json={"cat": {"name": "Tom", "age": 3}})

    assert response.status_code == 201
    assert response.json()["notes"] is None


@pytest.mark.asyncio
async def test_every_broken_field_is_reported(client: AsyncClient):
    response = await client.post("/cats", json={"cat": {"notes": "tiny"}})

    assert response.status_code == 422
    assert response.json() == {
        "name": ["can't be blank"],
        "age": ["can't be blank"],
        "notes": ["is too short (minimum is 10 characters)"],
    }


@pytest.mark.asyncio
async def test_id_and_timestamps_cannot_be_set_by_caller(client: AsyncClient):
    response = await client.post(
        "/cats",
        json={
            "cat": {
                "id": 99,
                "name": "Felix",
                "age": "2",
                "created_at": "2000-01-01T00:00:00Z",
                "admin": True,
            }
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["age"] == 2
    assert not body["created_at"].startswith("2000")
    assert "admin" not in body


@pytest.mark.asyncio
async def test_ids_are_distinct_and_list_keeps_creation_order(client: AsyncClient):
    ids = []
    for name in ("Felix", "Tom", "Garfield"):
        response = await client.post("/cats", json={"cat": {"name": name, "age": 1}})
        assert response.status_code == 201
        ids.append(response.json()["id"])

    assert len(set(ids)) == 3
    listed = (await client.get("/cats")).json()
    assert [c["name"] for c in listed] == ["Felix", "Tom", "Garfield"]


@pytest.mark.asyncio
async def test_list_is_idempotent(client: AsyncClient):
    await client.post("/cats", json={"cat": {"name": "Felix", "age": 2}})

    first = (await client.get("/cats")).json()
    second = (await client.get("/cats")).json()
    assert first == second


@pytest.mark.asyncio
async def test_missing_envelope_is_a_structured_422(client: AsyncClient):
    response = await client.post("/cats", json={"name": "Felix", "age": 2})

    assert response.status_code == 422
    assert response.json() == {"cat": ["is missing"]}
    assert await _count(client) == 0


@pytest.mark.asyncio
async def test_non_json_body_is_a_structured_422(client: AsyncClient):
    response = await client.post(
        "/cats",
        content=b"name=Felix&age=2",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json() == {"cat": ["is invalid"]}


@pytest.mark.asyncio
async def test_show_cat(client: AsyncClient):
    created = (
        await client.post("/cats", json={"cat": {"name": "Felix", "age": 2}})
    ).json()

    response = await client.get(f"/cats/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert (body["id"], body["name"], body["age"]) == (created["id"], "Felix", 2)


@pytest.mark.asyncio
async def test_show_unknown_cat_returns_404(client: AsyncClient):
    response = await client.get("/cats/42")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]
