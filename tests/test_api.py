import json

import pytest
from httpx import ASGITransport, AsyncClient

from pysquads.api import create_app
from pysquads.config import AnnealingSchedule, BalancerConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app(BalancerConfig(schedule=AnnealingSchedule(iterations=500)))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _players_payload(count: int) -> list[dict]:
    return [
        {
            "id": f"p{idx}",
            "name": f"Player {idx}",
            "attackDefense": idx % 11,
            "stamina": (idx * 3) % 10 + 1,
            "skills": (idx * 7) % 10 + 1,
            "teamPlayer": (idx * 5) % 10 + 1,
            "physicality": (idx * 2) % 10 + 1,
        }
        for idx in range(count)
    ]


def _sample_roster_csv() -> str:
    return """Id,Full Name,AD,Stamina,Skills,Team,Physical
1,Artan Berisha,2,8,7,9,8
2,Blerim Gashi,5,7,8,6,7
3,Driton Krasniqi,9,6,9,5,6
4,Elton Shala,4,9,6,8,9
5,Faton Leka,7,5,7,7,5
6,Gezim Rama,1,8,5,9,8
"""


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_formats(client: AsyncClient):
    resp = await client.get("/formats")
    assert resp.status_code == 200
    formats = resp.json()
    assert [fmt["key"] for fmt in formats] == ["4v4", "5v5", "6v6", "7v7"]
    assert formats[-1]["team_size"] == 7


@pytest.mark.anyio
async def test_teams_endpoint(client: AsyncClient):
    payload = {"players": _players_payload(14), "format": "7v7", "seed": 11}
    resp = await client.post("/teams", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["team_a"]) == len(body["team_b"]) == 7
    assert set(body["team_a"]) | set(body["team_b"]) == {f"p{idx}" for idx in range(14)}
    assert body["imbalance"] <= body["initial_imbalance"]
    assert body["iterations"] == 500
    assert body["summary_a"]["size"] == 7
    assert set(body["summary_a"]["positions"]) == {"DEF", "MID", "ATT"}
    assert body["breakdown"]["total"] == pytest.approx(body["imbalance"])

    again = await client.post("/teams", json=payload)
    assert again.json()["team_a"] == body["team_a"]


@pytest.mark.anyio
async def test_teams_endpoint_applies_options(client: AsyncClient):
    payload = {"players": _players_payload(8), "seed": 2, "options": {"iterations": 0}}
    resp = await client.post("/teams", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["iterations"] == 0
    assert body["imbalance"] == pytest.approx(body["initial_imbalance"])


@pytest.mark.anyio
async def test_teams_endpoint_rejects_odd_roster(client: AsyncClient):
    resp = await client.post("/teams", json={"players": _players_payload(9)})
    assert resp.status_code == 400
    assert "even" in resp.json()["detail"]


@pytest.mark.anyio
async def test_teams_endpoint_rejects_format_mismatch(client: AsyncClient):
    resp = await client.post("/teams", json={"players": _players_payload(8), "format": "5v5"})
    assert resp.status_code == 400

    resp = await client.post("/teams", json={"players": _players_payload(8), "format": "9v9"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_teams_endpoint_rejects_duplicate_ids(client: AsyncClient):
    players = _players_payload(4)
    players[1]["id"] = "p0"
    resp = await client.post("/teams", json={"players": players})
    assert resp.status_code == 400
    assert "Duplicate" in resp.json()["detail"]


@pytest.mark.anyio
async def test_teams_endpoint_validates_ratings(client: AsyncClient):
    players = _players_payload(2)
    players[0]["skills"] = 42
    resp = await client.post("/teams", json={"players": players})
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_teams_csv_upload(client: AsyncClient):
    files = {"roster": ("roster.csv", _sample_roster_csv(), "text/csv")}
    data = {
        "roster_mapping": json.dumps(
            {
                "player_id": "Id",
                "name": "Full Name",
                "attack_defense": "AD",
                "stamina": "Stamina",
                "skills": "Skills",
                "team_player": "Team",
                "physicality": "Physical",
            }
        ),
        "format": "6v6",
        "seed": "5",
    }
    resp = await client.post("/teams/csv", files=files, data=data)
    assert resp.status_code == 400, "6 players do not fill a 6v6 match"

    data["format"] = ""
    resp = await client.post("/teams/csv", files=files, data={k: v for k, v in data.items() if v})
    assert resp.status_code == 200
    body = resp.json()
    assert sorted(body["team_a"] + body["team_b"]) == ["1", "2", "3", "4", "5", "6"]
    assert body["seed"] == 5


@pytest.mark.anyio
async def test_teams_csv_rejects_bad_rows(client: AsyncClient):
    files = {"roster": ("roster.csv", "id,skills\na,5\nb,lots\n", "text/csv")}
    resp = await client.post("/teams/csv", files=files)
    assert resp.status_code == 400
    assert "Row 3" in resp.json()["detail"]


@pytest.mark.anyio
async def test_teams_csv_rejects_invalid_mapping(client: AsyncClient):
    files = {"roster": ("roster.csv", _sample_roster_csv(), "text/csv")}
    resp = await client.post("/teams/csv", files=files, data={"roster_mapping": "{not json"})
    assert resp.status_code == 400
