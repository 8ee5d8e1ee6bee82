import json
import logging

import pytest

from clockify_mcp_server import server


async def test_current_user_resource(mcp, upstream, current_user):
    upstream.add("GET", "/user", json=current_user)

    contents = list(await mcp.read_resource("clockify://user"))

    assert json.loads(contents[0].content) == {
        "id": "u1",
        "name": "Ann",
        "email": "a@x.com",
        "activeWorkspace": "w1",
        "memberships": [],
    }


async def test_workspaces_resource(mcp, upstream):
    upstream.add("GET", "/workspaces", json=[{"id": "w1", "name": "Main", "costRate": None}])

    contents = list(await mcp.read_resource("clockify://workspaces"))

    assert json.loads(contents[0].content) == [{"id": "w1", "name": "Main"}]


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(server, "load_dotenv", lambda: None)


def test_main_exits_without_api_key(monkeypatch, no_dotenv):
    monkeypatch.delenv("CLOCKIFY_API_KEY", raising=False)
    created = []
    monkeypatch.setattr(server, "create_mcp_server", lambda config: created.append(config))

    with pytest.raises(SystemExit) as exc_info:
        server.main()

    assert exc_info.value.code == 1
    assert created == []


def test_main_exits_when_startup_fails(monkeypatch, no_dotenv):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "secret")
    monkeypatch.delenv("CLOCKIFY_LOG_LEVEL", raising=False)

    def broken(config):
        raise RuntimeError("cannot start")

    monkeypatch.setattr(server, "create_mcp_server", broken)

    with pytest.raises(SystemExit) as exc_info:
        server.main()

    assert exc_info.value.code == 1


def test_main_runs_server(monkeypatch, no_dotenv):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "secret")
    monkeypatch.delenv("CLOCKIFY_LOG_LEVEL", raising=False)
    runs = []

    class FakeServer:
        def run(self):
            runs.append(True)

    monkeypatch.setattr(server, "create_mcp_server", lambda config: FakeServer())

    server.main()

    assert runs == [True]


def test_create_mcp_server_logs_registered_tools(config, transport, caplog):
    with caplog.at_level(logging.INFO, logger="clockify_mcp_server.tools.registry"):
        server.create_mcp_server(config, transport=transport)

    assert "Registered tool get_current_user" in caplog.text
    assert "Registered tool duplicate_time_entry" in caplog.text
