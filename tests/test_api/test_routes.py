"""Tests for the HTTP endpoints."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

import protolint.deps as deps
from protolint.examples import EXAMPLE_PROTO
from protolint.main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


class TestValidateEndpoint:
    def test_json_body(self, client: TestClient) -> None:
        response = client.post("/api/validate", json={"content": "message foo {\n}\n"})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert set(body) == {"valid", "errors", "warnings", "info"}
        rules = {issue["rule"] for issue in body["errors"]}
        assert "message-name-pascal-case" in rules
        assert "syntax-declaration" in rules

    def test_file_upload(self, client: TestClient) -> None:
        response = client.post(
            "/api/validate",
            files={"file": ("example.proto", EXAMPLE_PROTO.encode(), "text/plain")},
        )
        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": [], "warnings": [], "info": []}

    def test_missing_content(self, client: TestClient) -> None:
        response = client.post("/api/validate", json={"text": "x"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing 'content' field"

    def test_unparsable_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/validate",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request body"

    def test_missing_file_part(self, client: TestClient) -> None:
        response = client.post(
            "/api/validate",
            files={"other": ("a.proto", b"syntax", "text/plain")},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "No file provided"

    def test_binary_upload_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/validate",
            files={"file": ("a.proto", b"\xff\xfe\x00", "application/octet-stream")},
        )
        assert response.status_code == 400

    def test_content_too_large(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(deps._options, "max_content_bytes", 10)
        response = client.post("/api/validate", json={"content": "x" * 11})
        assert response.status_code == 413

    def test_upload_too_large(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(deps._options, "max_content_bytes", 10)
        response = client.post(
            "/api/validate",
            files={"file": ("big.proto", b"x" * 5000, "text/plain")},
        )
        assert response.status_code == 413

    def test_upload_at_limit_is_accepted(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(deps._options, "max_content_bytes", 10)
        response = client.post(
            "/api/validate",
            files={"file": ("small.proto", b"x" * 10, "text/plain")},
        )
        assert response.status_code == 200


class TestFormatEndpoint:
    def test_formats_content(self, client: TestClient) -> None:
        response = client.post("/api/format", json={"content": "message  Foo{\nstring name=1;\n}"})
        assert response.status_code == 200
        assert response.json() == {"formatted": "message Foo {\n  string name = 1;\n}\n"}

    def test_missing_content(self, client: TestClient) -> None:
        response = client.post("/api/format", json={})
        assert response.status_code == 400

    def test_non_object_body(self, client: TestClient) -> None:
        response = client.post("/api/format", json=["content"])
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing 'content' field"


class TestCatalogEndpoints:
    def test_rules(self, client: TestClient) -> None:
        response = client.get("/api/rules")
        assert response.status_code == 200
        rules = {entry["rule"]: entry for entry in response.json()}
        assert rules["max-line-length"]["severity"] == "warning"
        assert rules["enum-first-value-unspecified"]["severity"] == "error"
        assert "syntax-error" not in rules

    def test_example(self, client: TestClient) -> None:
        response = client.get("/api/example")
        assert response.status_code == 200
        assert response.json()["content"] == EXAMPLE_PROTO

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}
