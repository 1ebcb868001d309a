"""Voltage level API."""

from datetime import date, timedelta

from httpx import AsyncClient

BASE = "/api/v1/voltage-levels"


def _body(code: str, sort_order: int | None = None, **extra) -> dict:
    return {
        "code": code,
        "name_cs": f"Napětí {code}",
        "name_en": f"Voltage {code}",
        "voltage_range_cs": "do 1 kV",
        "voltage_range_en": "up to 1 kV",
        "sort_order": sort_order,
        **extra,
    }


async def test_crud(client: AsyncClient) -> None:
    created = await client.post(BASE, json=_body("NN", 1))
    assert created.status_code == 201
    level_id = created.json()["id"]

    assert (await client.get(f"{BASE}/{level_id}")).json()["code"] == "NN"
    assert (await client.get(f"{BASE}/code/NN")).json()["id"] == level_id

    updated = await client.put(f"{BASE}/{level_id}", json=_body("NN", 7))
    assert updated.status_code == 200
    assert updated.json()["sort_order"] == 7

    assert (await client.delete(f"{BASE}/{level_id}")).status_code == 204
    assert (await client.get(f"{BASE}/code/NN")).status_code == 404


async def test_list_order_and_validity_filter(client: AsyncClient) -> None:
    expired = (date.today() - timedelta(days=10)).isoformat()
    await client.post(BASE, json=_body("VN", 2))
    await client.post(BASE, json=_body("NN", 1))
    await client.post(BASE, json=_body("ZVN"))
    await client.post(BASE, json=_body("MN", 0, valid_to=expired))

    listing = await client.get(BASE)
    assert [v["code"] for v in listing.json()] == ["MN", "NN", "VN", "ZVN"]

    valid = await client.get(BASE, params={"valid_only": "true"})
    assert [v["code"] for v in valid.json()] == ["NN", "VN", "ZVN"]


async def test_duplicate_and_validation(client: AsyncClient) -> None:
    await client.post(BASE, json=_body("NN"))

    duplicate = await client.post(BASE, json=_body("NN"))
    assert duplicate.status_code == 409

    too_long = await client.post(BASE, json=_body("X" * 11))
    assert too_long.status_code == 422
