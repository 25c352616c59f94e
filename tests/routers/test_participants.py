from typing import Callable
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from contest.exceptions import StorageError


class TestParticipantsRouter:
    """Tests for the staff participant endpoints."""

    def test_list_participants_sorted_by_name(
        self, client: TestClient, register: Callable[..., dict]
    ) -> None:
        register(name="Zoe", email="z@x.com")
        register(name="adam", email="ad@x.com")

        response = client.get("/api/participants")

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data] == ["adam", "Zoe"]
        assert set(data[0]) == {
            "id",
            "name",
            "email",
            "phone",
            "company",
            "score",
            "updated_at",
        }

    def test_list_participants_empty(self, client: TestClient) -> None:
        response = client.get("/api/participants")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_participant(
        self, client: TestClient, register: Callable[..., dict]
    ) -> None:
        participant = register()

        response = client.get(f"/api/participants/{participant['id']}")

        assert response.status_code == 200
        assert response.json() == participant

    def test_get_participant_not_found(self, client: TestClient) -> None:
        response = client.get("/api/participants/42")

        assert response.status_code == 404

    def test_delete_participant(
        self, client: TestClient, register: Callable[..., dict]
    ) -> None:
        alice = register()
        bob = register(name="Bob", email="b@x.com")
        client.post(f"/api/scores/{alice['id']}", json={"score": 33})

        response = client.delete(f"/api/participants/{alice['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == alice["id"]
        assert response.json()["score"] == 33
        assert [p["id"] for p in client.get("/api/participants").json()] == [
            bob["id"]
        ]
        assert client.get("/api/leaderboard").json() == []

        second = client.delete(f"/api/participants/{alice['id']}")
        assert second.status_code == 404

    def test_deleted_id_is_not_reused(
        self, client: TestClient, register: Callable[..., dict]
    ) -> None:
        first = register(email="1@x.com")
        second = register(email="2@x.com")
        client.delete(f"/api/participants/{second['id']}")

        third = register(email="3@x.com")

        assert third["id"] > second["id"] > first["id"]

    def test_list_participants_storage_failure(self, client: TestClient) -> None:
        with patch(
            "contest.services.list_participants_service"
            ".ListParticipantsService.list_participants",
            new_callable=AsyncMock,
            side_effect=StorageError("boom"),
        ):
            response = client.get("/api/participants")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"

    def test_wrong_http_method(self, client: TestClient) -> None:
        assert client.put("/api/participants").status_code == 405
        assert client.delete("/api/participants").status_code == 405
