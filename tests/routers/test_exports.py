import csv
import io
from typing import Callable
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from contest.exceptions import StorageError


class TestExportsRouter:
    """Tests for the CSV export endpoints."""

    @pytest.mark.parametrize("path", ["/api/export", "/api/export-csv"])
    def test_export_is_csv_attachment(
        self, client: TestClient, register: Callable[..., dict], path: str
    ) -> None:
        register(name="Unscored", email="u@x.com", company="Acme, Inc.")
        top = register(name="Top", email="t@x.com")
        client.post(f"/api/scores/{top['id']}", json={"score": 88})

        response = client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="participants.csv"'
        )
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0] == [
            "id",
            "name",
            "email",
            "phone",
            "company",
            "score",
            "created_at",
            "updated_at",
        ]
        assert [row[1] for row in rows[1:]] == ["Top", "Unscored"]
        assert rows[1][5] == "88"
        assert rows[2][4] == "Acme, Inc."
        assert rows[2][5] == ""

    def test_export_empty(self, client: TestClient) -> None:
        response = client.get("/api/export")

        assert response.status_code == 200
        assert response.text.splitlines() == [
            "id,name,email,phone,company,score,created_at,updated_at"
        ]

    def test_export_storage_failure(self, client: TestClient) -> None:
        with patch(
            "contest.services.export_participants_service"
            ".ExportParticipantsService.export_participants",
            new_callable=AsyncMock,
            side_effect=StorageError("boom"),
        ):
            response = client.get("/api/export-csv")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
