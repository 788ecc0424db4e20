import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from conftest import make_chunk
import main
from config import LLMConfig
from main import app, get_relay
from prompts import build_system_prompt
from relay import USER_SUFFIX, CompletionRelay

PAYLOAD = {
    "model": "gpt-4o",
    "uiLibrary": "shadcn",
    "messages": [{"role": "user", "content": "Build a button"}],
}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_relay(relay):
    app.dependency_overrides[get_relay] = lambda: relay


def test_generate_streams_raw_text(client, fake_client):
    llm = fake_client([make_chunk("Hello"), make_chunk(""), make_chunk(" world")])
    use_relay(CompletionRelay(llm))

    r = client.post("/api/generateCode", json=PAYLOAD)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/event-stream")
    assert r.text == "Hello world"
    assert llm.chat.completions.stream.close_calls == 1


def test_generate_sends_library_prompt(client, fake_client):
    llm = fake_client([make_chunk("ok")])
    use_relay(CompletionRelay(llm))

    client.post("/api/generateCode", json=PAYLOAD)

    messages = llm.chat.completions.calls[0]["messages"]
    assert messages[0] == {"role": "system", "content": build_system_prompt("shadcn")}
    assert messages[1] == {"role": "user", "content": "Build a button" + USER_SUFFIX}


def test_invalid_role_returns_422_without_upstream_call(client, fake_client):
    llm = fake_client([make_chunk("never")])
    use_relay(CompletionRelay(llm))

    body = {**PAYLOAD, "messages": [{"role": "system", "content": "hi"}]}
    r = client.post("/api/generateCode", json=body)

    assert r.status_code == 422
    assert r.headers["content-type"].startswith("text/plain")
    assert "messages.0.role" in r.text
    assert llm.chat.completions.calls == []


def test_missing_field_returns_422(client, fake_client):
    use_relay(CompletionRelay(fake_client()))

    r = client.post("/api/generateCode", json={"model": "gpt-4o", "messages": []})

    assert r.status_code == 422
    assert "uiLibrary" in r.text


def test_malformed_json_returns_422(client, fake_client):
    use_relay(CompletionRelay(fake_client()))

    r = client.post(
        "/api/generateCode",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert r.status_code == 422
    assert r.text == "Request body is not valid JSON"


def test_upstream_failure_returns_server_error(client, fake_client):
    error = openai.AuthenticationError(
        "bad key",
        response=httpx.Response(401, request=httpx.Request("POST", "https://llm.test/v1/chat/completions")),
        body=None,
    )
    use_relay(CompletionRelay(fake_client(create_error=error)))

    r = client.post("/api/generateCode", json=PAYLOAD)

    assert r.status_code == 502
    assert "bad key" in r.text


def test_health(monkeypatch):
    monkeypatch.setattr(main, "load_llm_config", lambda: LLMConfig(api_key="sk-test"))

    with TestClient(app) as client:
        r = client.get("/api/health")
        assert isinstance(app.state.relay, CompletionRelay)

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["ui_libraries"] == ["shadcn", "acceternity", "reactai"]
    assert data["components"]["shadcn"] > 0
    assert data["components"]["acceternity"] > 0


def test_snake_case_library_key_returns_422(client, fake_client):
    llm = fake_client([make_chunk("never")])
    use_relay(CompletionRelay(llm))

    body = {"model": "gpt-4o", "ui_library": "shadcn", "messages": []}
    r = client.post("/api/generateCode", json=body)

    assert r.status_code == 422
    assert "uiLibrary" in r.text
    assert llm.chat.completions.calls == []
