"""
Tests for the API router endpoints.
"""

from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from text_editor.main import app

client = TestClient(app)


class TestTextEditorAPI:
    """Test cases for the text editor endpoint."""

    def test_view_file(self, dispatcher, sample_file):
        """Test viewing a file through the API."""
        with patch("text_editor.api.routers.get_dispatcher", return_value=dispatcher):
            response = client.post(
                "/text-editor",
                json={"command": "view", "path": sample_file, "view_range": [2, 3]},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "File content:"
        assert data["content"] == "2: It has multiple lines.\n3: This is line 3."
        assert data["error_kind"] is None

    def test_null_view_range_start(self, dispatcher, sample_file):
        """Test that a null start line is accepted."""
        with patch("text_editor.api.routers.get_dispatcher", return_value=dispatcher):
            response = client.post(
                "/text-editor",
                json={"command": "view", "path": sample_file, "view_range": [None, 1]},
            )

        assert response.json()["content"] == "1: This is a sample text file."

    def test_failure_is_reported_in_body(self, dispatcher, sample_file):
        """Test that editor failures are 200 responses with success=false."""
        with patch("text_editor.api.routers.get_dispatcher", return_value=dispatcher):
            response = client.post(
                "/text-editor",
                json={"command": "undo_edit", "path": sample_file},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["error_kind"] == "NoHistory"
        assert "No edit history found" in data["message"]

    def test_replace_and_undo(self, dispatcher, sample_file):
        """Test a mutation followed by its undo."""
        original = Path(sample_file).read_text(encoding="utf-8")
        with patch("text_editor.api.routers.get_dispatcher", return_value=dispatcher):
            replaced = client.post(
                "/text-editor",
                json={
                    "command": "str_replace",
                    "path": sample_file,
                    "old_str": "line 4",
                    "new_str": "line four",
                },
            )
            undone = client.post(
                "/text-editor", json={"command": "undo_edit", "path": sample_file}
            )

        assert replaced.json()["success"] is True
        assert undone.json()["success"] is True
        assert Path(sample_file).read_text(encoding="utf-8") == original

    def test_missing_path_is_validation_error(self):
        """Test that the request schema requires a path."""
        response = client.post("/text-editor", json={"command": "view"})

        assert response.status_code == 422

    def test_dispatcher_crash(self):
        """Test that an exception outside the dispatcher becomes a 500."""
        with patch("text_editor.api.routers.get_dispatcher") as mock_dispatcher:
            mock_dispatcher.return_value.execute.side_effect = Exception("boom")

            response = client.post(
                "/text-editor", json={"command": "view", "path": "/tmp/x"}
            )

        assert response.status_code == 500
        assert response.json()["detail"] == "boom"


class TestToolsAPI:
    """Test cases for the tools listing endpoint."""

    def test_list_tools(self):
        response = client.get("/tools")

        assert response.status_code == 200
        tools = response.json()["tools"]
        assert len(tools) == 1
        assert tools[0]["name"] == "text_editor"
        assert "text_editor_20241022" in tools[0]["description"]
        assert tools[0]["parameters"]["required"] == ["command", "path"]
