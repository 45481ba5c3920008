"""
backend/tests/test_api_routes.py

Purpose:
    End-to-end HTTP tests for the team and player routers, including the
    404 / 409 / 422 translations done at the app level.
"""

from __future__ import annotations

COWBOYS = {"teamName": "Cowboys", "wins": 10, "losses": 6, "isCurrentChampion": False}


def _add_cowboys(client):
    response = client.post("/api/v1/teams", json=COWBOYS)
    assert response.status_code == 201
    return client.get("/api/v1/teams/Cowboys").json()["id"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert response.headers.get("X-Request-ID")


def test_add_team_list_and_get(client):
    response = client.post("/api/v1/teams", json=COWBOYS)
    assert response.status_code == 201
    assert response.json() == {"detail": "Team Cowboys added"}

    listed = client.get("/api/v1/teams").json()
    assert len(listed) == 1
    assert listed[0]["teamName"] == "Cowboys"
    assert "isCurrentChampion" not in listed[0]

    full = client.get("/api/v1/teams/Cowboys").json()
    assert full["teamName"] == "Cowboys"
    assert full["wins"] == 10
    assert full["losses"] == 6
    assert full["isCurrentChampion"] is False


def test_list_teams_empty(client):
    response = client.get("/api/v1/teams")

    assert response.status_code == 200
    assert response.json() == []


def test_get_missing_team_is_404(client):
    response = client.get("/api/v1/teams/Nonexistent")

    assert response.status_code == 404
    assert "Nonexistent" in response.json()["detail"]


def test_add_team_requires_name(client):
    assert client.post("/api/v1/teams", json={"wins": 3}).status_code == 422
    assert client.post("/api/v1/teams", json={"teamName": ""}).status_code == 422


def test_duplicate_team_is_409(client):
    _add_cowboys(client)

    response = client.post("/api/v1/teams", json=COWBOYS)

    assert response.status_code == 409


def test_update_team_partial(client):
    team_id = _add_cowboys(client)

    response = client.put(f"/api/v1/teams/{team_id}", json={"wins": 12})

    assert response.status_code == 200
    assert response.json() == {"detail": f"Team {team_id} updated"}
    full = client.get("/api/v1/teams/Cowboys").json()
    assert full == {**COWBOYS, "id": team_id, "wins": 12}


def test_update_missing_team_is_not_an_error(client):
    response = client.put("/api/v1/teams/9999", json={"wins": 1})

    assert response.status_code == 200
    assert response.json() == {"detail": "Team 9999 not updated: no team with that id"}


def test_update_null_team_name_is_422(client):
    team_id = _add_cowboys(client)

    response = client.put(f"/api/v1/teams/{team_id}", json={"teamName": None})

    assert response.status_code == 422


def test_delete_team_removes_its_players(client):
    team_id = _add_cowboys(client)
    client.post("/api/v1/players", json={"name": "Dak-Prescott", "teamId": team_id})

    response = client.delete(f"/api/v1/teams/{team_id}")

    assert response.status_code == 200
    assert response.json() == {"detail": f"Team {team_id} deleted"}
    assert client.get("/api/v1/teams/Cowboys").status_code == 404
    assert client.get("/api/v1/players/Dak-Prescott").status_code == 404


def test_delete_missing_team_still_confirms(client):
    response = client.delete("/api/v1/teams/9999")

    assert response.status_code == 200
    assert response.json() == {"detail": "Team 9999 deleted"}


def test_add_and_get_player(client):
    team_id = _add_cowboys(client)

    response = client.post(
        "/api/v1/players",
        json={"name": "Dak-Prescott", "position": "Quarterback", "teamId": team_id},
    )
    assert response.status_code == 201
    assert response.json() == {"detail": "Player Dak-Prescott added"}

    player = client.get("/api/v1/players/Dak-Prescott").json()
    assert player == {"name": "Dak-Prescott", "position": "Quarterback", "teamName": "Cowboys"}


def test_add_player_ignores_team_name(client):
    team_id = _add_cowboys(client)

    client.post(
        "/api/v1/players",
        json={"name": "Dak-Prescott", "teamId": team_id, "teamName": "Giants"},
    )

    assert client.get("/api/v1/players/Dak-Prescott").json()["teamName"] == "Cowboys"


def test_add_player_unknown_team_is_409(client):
    response = client.post("/api/v1/players", json={"name": "Ghost", "teamId": 9999})

    assert response.status_code == 409
    assert client.get("/api/v1/players/Ghost").status_code == 404


def test_add_player_requires_team_id(client):
    response = client.post("/api/v1/players", json={"name": "Dak-Prescott"})

    assert response.status_code == 422


def test_get_missing_player_is_404(client):
    assert client.get("/api/v1/players/Nobody").status_code == 404


def test_team_roster(client):
    team_id = _add_cowboys(client)
    client.post("/api/v1/players", json={"name": "Dak-Prescott", "position": "Quarterback", "teamId": team_id})
    client.post("/api/v1/players", json={"name": "CeeDee-Lamb", "position": "Wide Receiver", "teamId": team_id})

    response = client.get("/api/v1/teams/Cowboys/players")

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Dak-Prescott", "position": "Quarterback", "teamName": "Cowboys"},
        {"name": "CeeDee-Lamb", "position": "Wide Receiver", "teamName": "Cowboys"},
    ]


def test_team_roster_unknown_team_is_404(client):
    assert client.get("/api/v1/teams/Nonexistent/players").status_code == 404
