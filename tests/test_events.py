"""Events: required fields and optional justification."""

import pytest


@pytest.mark.parametrize("missing", ["data", "evento", "nick", "status"])
async def test_create_without_required_field_is_rejected(client, fake_db, missing):
    body = {"clan": 1, "data": "2024-06-01", "evento": "Cerco", "nick": "Bjorn", "status": "presente"}
    del body[missing]

    res = await client.post("/api/events", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "campos obrigatórios faltando"}
    assert fake_db.tables["events"] == []


async def test_justification_is_stored_as_null_when_absent_or_empty(client):
    body = {"clan": 2, "data": "2024-06-01", "evento": "Cerco", "nick": "Bjorn", "status": "ausente"}

    absent = (await client.post("/api/events", json=body)).json()
    empty = (await client.post("/api/events", json={**body, "justificativa": ""})).json()

    assert absent["justificativa"] is None
    assert empty["justificativa"] is None


async def test_update_overwrites_justification(client):
    body = {
        "clan": 1, "data": "2024-06-01", "evento": "Cerco", "nick": "Bjorn",
        "status": "ausente", "justificativa": "viagem",
    }
    event = (await client.post("/api/events", json=body)).json()

    res = await client.put(
        f"/api/events/{event['id']}",
        json={"data": "2024-06-01", "evento": "Cerco", "nick": "Bjorn", "status": "presente"},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "presente"
    assert res.json()["justificativa"] is None


async def test_update_that_nulls_a_required_column_is_a_storage_error(client):
    body = {"clan": 1, "data": "2024-06-01", "evento": "Cerco", "nick": "Bjorn", "status": "presente"}
    event = (await client.post("/api/events", json=body)).json()

    res = await client.put(f"/api/events/{event['id']}", json={"data": "2024-06-02"})
    assert res.status_code == 500
    assert res.json() == {"error": "erro ao atualizar evento"}


async def test_list_is_ordered_by_date(client):
    for day in ("2024-06-03", "2024-06-01", "2024-06-02"):
        await client.post(
            "/api/events",
            json={"clan": 1, "data": day, "evento": "Cerco", "nick": "Bjorn", "status": "presente"},
        )

    res = await client.get("/api/events", params={"clan": 1})
    assert [row["data"] for row in res.json()] == ["2024-06-01", "2024-06-02", "2024-06-03"]
