"""Integration tests for the viewer API

Tests cover:
- Upload of JSON / JSONL and the resulting page view
- Rejected uploads leave the loaded data alone
- Filter, page and page-size actions
- Health endpoint and HTML page
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from tdviewer.api.app import create_app
from tdviewer.dataset.state import ViewerState


@pytest.fixture
def client():
    """Fresh app and state per test"""
    return TestClient(create_app(ViewerState()))


@pytest.fixture
def loaded_client(client, mixed_jsonl):
    response = client.post("/api/load", json={"filename": "train.jsonl", "content": mixed_jsonl})
    assert response.status_code == 200
    return client


class TestLoad:
    def test_jsonl_upload(self, client, mixed_jsonl):
        response = client.post(
            "/api/load", json={"filename": "train.jsonl", "content": mixed_jsonl}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_conversations"] == 12
        assert body["indices"] == [0, 1, 2, 4, 5]
        assert body["current_filter"] == "all"
        assert body["pagination"]["total_pages"] == 3
        assert body["languages"] == ["javascript", "jupyter", "python", "rust"]
        assert body["language_stats"][0] == {"language": "javascript", "count": 4}
        assert body["conversations"][3]["global_index"] == 4

    def test_json_upload(self, client, mixed_json):
        response = client.post("/api/load", json={"filename": "train.json", "content": mixed_json})

        assert response.status_code == 200
        assert response.json()["indices"] == [0, 1, 2, 3, 4]

    def test_jsonl_content_with_json_name_is_rejected(self, client, mixed_jsonl):
        """Mode comes from the extension, so JSONL text named .json fails to parse"""
        response = client.post("/api/load", json={"filename": "train.json", "content": mixed_jsonl})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid file format. Please check the file."

    def test_bad_upload_keeps_previous_data(self, loaded_client):
        loaded_client.post("/api/filter", json={"criterion": "python"})

        response = loaded_client.post(
            "/api/load", json={"filename": "bad.jsonl", "content": '{"messages": []}\nnope'}
        )
        assert response.status_code == 400

        view = loaded_client.get("/api/view").json()
        assert view["total_conversations"] == 12
        assert view["current_filter"] == "python"
        assert view["indices"] == [0, 2, 9, 12]

    def test_deeply_nested_upload_is_invalid_file(self, loaded_client):
        content = "[" * 100000 + "]" * 100000

        response = loaded_client.post("/api/load", json={"filename": "deep.json", "content": content})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid file format. Please check the file."
        assert loaded_client.get("/api/view").json()["total_conversations"] == 12

    def test_upload_with_bom(self, client):
        content = "\ufeff" + '{"messages": []}'

        response = client.post("/api/load", json={"filename": "bom.jsonl", "content": content})

        assert response.status_code == 200
        assert response.json()["indices"] == [0]

    def test_unsupported_extension_is_validation_error(self, client):
        response = client.post("/api/load", json={"filename": "train.csv", "content": "a,b"})

        assert response.status_code == 422
        assert response.json()["invalid_fields"] == ["filename"]

    def test_sample(self, client):
        response = client.post("/api/sample")

        assert response.status_code == 200
        body = response.json()
        assert body["indices"] == [0, 1]
        assert body["conversations"][1]["messages"][1]["content"] == (
            "How do I reverse a string in Python?"
        )


class TestNavigation:
    def test_filter_resets_page(self, loaded_client):
        loaded_client.post("/api/page", json={"page": 2})

        body = loaded_client.post("/api/filter", json={"criterion": "rust"}).json()

        assert body["pagination"]["current_page"] == 1
        assert body["pagination"]["total_items"] == 2
        assert body["indices"] == [5, 13]

    def test_filter_by_long_label(self, client):
        """Unknown extensions become labels of any length and stay filterable"""
        label = "x" * 120
        content = json.dumps({"messages": [{"role": "user", "content": f"current_file_path: a.{label}"}]})
        client.post("/api/load", json={"filename": "long.jsonl", "content": content})

        response = client.post("/api/filter", json={"criterion": label})

        assert response.status_code == 200
        body = response.json()
        assert body["languages"] == [label]
        assert body["indices"] == [0]

    def test_page(self, loaded_client):
        body = loaded_client.post("/api/page", json={"page": 3}).json()

        assert body["indices"] == [13, 14]
        assert body["pagination"]["page_info"] == "Page 3 of 3"
        assert body["pagination"]["first_item"] == 11
        assert body["pagination"]["last_item"] == 12
        assert body["pagination"]["has_next"] is False

    def test_out_of_range_page_is_empty(self, loaded_client):
        response = loaded_client.post("/api/page", json={"page": 42})

        assert response.status_code == 200
        assert response.json()["conversations"] == []

    def test_page_size(self, loaded_client):
        loaded_client.post("/api/page", json={"page": 2})

        body = loaded_client.post("/api/page-size", json={"items_per_page": 10}).json()

        assert body["pagination"]["current_page"] == 1
        assert body["pagination"]["items_per_page"] == 10
        assert body["pagination"]["total_pages"] == 2
        assert len(body["indices"]) == 10

    def test_invalid_page_size(self, loaded_client):
        response = loaded_client.post("/api/page-size", json={"items_per_page": 15})

        assert response.status_code == 400
        assert loaded_client.get("/api/view").json()["pagination"]["items_per_page"] == 5

    def test_non_integer_page_is_validation_error(self, loaded_client):
        response = loaded_client.post("/api/page", json={"page": "next"})

        assert response.status_code == 422


class TestPagesAndHealth:
    def test_html_page(self, loaded_client):
        response = loaded_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h3>Conversation 0</h3>" in response.text

    def test_health(self, loaded_client):
        body = loaded_client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["dataset"]["conversations"] == 12
        assert body["dataset"]["languages"] == 4
        assert body["parse_latency"]["count"] == 1
