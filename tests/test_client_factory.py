"""
Tests for per-session client construction and Outcome rendering.
"""
import json
from unittest.mock import Mock, PropertyMock

from fitonex_mcp import client_factory
from fitonex_mcp.sdk.result import Outcome


def test_session_file_path_strips_traversal(monkeypatch, tmp_path):
    monkeypatch.setenv("FITONEX_SESSION_DIR", str(tmp_path))

    path = client_factory.session_file_path("../../etc/passwd")

    assert path.parent == tmp_path
    assert path.name == "etcpasswd.json"


def test_session_file_path_empty_id_uses_local(monkeypatch, tmp_path):
    monkeypatch.setenv("FITONEX_SESSION_DIR", str(tmp_path))

    assert client_factory.session_file_path("//").name == "local.json"


def test_get_client_persists_per_session(monkeypatch, tmp_path):
    """Test two clients for the same MCP session share the credential."""
    monkeypatch.setenv("FITONEX_SESSION_DIR", str(tmp_path))
    monkeypatch.setenv("FITONEX_API_URL", "http://api.example")
    ctx = Mock()
    ctx.session_id = "abc-123"

    first = client_factory.get_client(ctx)
    first.session.set_credential("tok")
    second = client_factory.get_client(ctx)

    assert second.api_url == "http://api.example"
    assert second.session.get_credential() == "tok"
    assert (tmp_path / "abc-123.json").exists()


def test_get_client_without_request_context(monkeypatch, tmp_path):
    monkeypatch.setenv("FITONEX_SESSION_DIR", str(tmp_path))
    ctx = Mock()
    type(ctx).session_id = PropertyMock(side_effect=RuntimeError("no request"))

    client = client_factory.get_client(ctx)
    client.session.set_credential("tok")

    assert (tmp_path / "local.json").exists()


def test_render_success():
    assert json.loads(client_factory.render(Outcome.ok([1, 2]))) == {"success": True, "data": [1, 2]}


def test_render_unauthorized_clears_session(sdk_client):
    sdk_client.session.set_credential("stale")
    outcome = Outcome.fail("Fetch profile failed: unauthorized", "Unauthorized", 401)

    data = json.loads(client_factory.render(outcome, sdk_client))

    assert data["status_code"] == 401
    assert "note" in data
    assert sdk_client.session.get_credential() is None


def test_render_other_failure_keeps_session(sdk_client):
    sdk_client.session.set_credential("tok")
    outcome = Outcome.fail("Fetch gym failed: gone", "NotFound", 404)

    data = json.loads(client_factory.render(outcome, sdk_client))

    assert "note" not in data
    assert sdk_client.session.get_credential() == "tok"
