import httpx
import pytest

from swift_sdk import Session, SwiftClient
from swift_sdk.client.exceptions import AuthenticationError, ConfigurationError

from .conftest import STORAGE_URL, TOKEN

def test_session_requires_storage_url():
    with pytest.raises(ConfigurationError):
        Session(storage_url="")

def test_session_rejects_non_positive_timeout():
    with pytest.raises(ConfigurationError):
        Session(storage_url=STORAGE_URL, timeout=0)

def test_session_is_immutable(session):
    with pytest.raises(AttributeError):
        session.auth_token = "other"

def test_session_from_environment(monkeypatch):
    monkeypatch.setenv("SWIFT_STORAGE_URL", STORAGE_URL)
    monkeypatch.setenv("SWIFT_AUTH_TOKEN", TOKEN)
    monkeypatch.setenv("SWIFT_TIMEOUT", "5")
    monkeypatch.setenv("SWIFT_VERIFY_SSL", "false")

    session = Session.from_environment()

    assert session.storage_url == STORAGE_URL
    assert session.auth_token == TOKEN
    assert session.timeout == 5.0
    assert session.verify_ssl is False

def test_session_from_environment_overrides(monkeypatch):
    monkeypatch.setenv("SWIFT_STORAGE_URL", STORAGE_URL)
    monkeypatch.delenv("SWIFT_AUTH_TOKEN", raising=False)

    session = Session.from_environment(auth_token="explicit")

    assert session.auth_token == "explicit"
    assert session.verify_ssl is True

def test_session_from_environment_requires_url(monkeypatch):
    monkeypatch.delenv("SWIFT_STORAGE_URL", raising=False)
    with pytest.raises(ConfigurationError):
        Session.from_environment()

def test_session_from_environment_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("SWIFT_STORAGE_URL", STORAGE_URL)
    monkeypatch.setenv("SWIFT_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        Session.from_environment()

def test_get_headers_returns_fresh_mapping(client):
    first = client.get_headers()
    first["X-Auth-Token"] = "tampered"

    assert client.get_headers()["X-Auth-Token"] == TOKEN
    assert client.get_headers()["User-Agent"].startswith("swift-sdk-python/")

def test_get_headers_uses_token_provider():
    calls = []

    def provider():
        calls.append(1)
        return f"token-{len(calls)}"

    client = SwiftClient(Session(storage_url=STORAGE_URL, token_provider=provider), http_client=httpx.Client())
    try:
        assert client.get_headers()["X-Auth-Token"] == "token-1"
        assert client.get_headers()["X-Auth-Token"] == "token-2"
    finally:
        client._http_client.close()

def test_get_headers_without_token():
    client = SwiftClient(Session(storage_url=STORAGE_URL, token_provider=lambda: ""), http_client=httpx.Client())
    try:
        with pytest.raises(AuthenticationError) as excinfo:
            client.get_headers()
        assert excinfo.value.code == "ERR_AUTH"
    finally:
        client._http_client.close()

def test_get_headers_propagates_provider_errors():
    def provider():
        raise ValueError("identity service down")

    client = SwiftClient(Session(storage_url=STORAGE_URL, token_provider=provider), http_client=httpx.Client())
    try:
        with pytest.raises(ValueError, match="identity service down"):
            client.get_headers()
    finally:
        client._http_client.close()

def test_urls():
    client = SwiftClient(Session(storage_url=STORAGE_URL + "/", auth_token=TOKEN), http_client=httpx.Client())
    try:
        assert client.get_account_url() == STORAGE_URL
        assert client.get_container_url("c1") == f"{STORAGE_URL}/c1"
        assert client.get_object_url("c1", "o1") == f"{STORAGE_URL}/c1/o1"
        assert client.get_object_url("my docs", "a/b c.txt") == f"{STORAGE_URL}/my%20docs/a/b%20c.txt"
    finally:
        client._http_client.close()

def test_close_leaves_injected_http_client_open(session):
    http_client = httpx.Client()
    SwiftClient(session, http_client=http_client).close()
    assert not http_client.is_closed
    http_client.close()

def test_context_manager_closes_owned_http_client(session):
    with SwiftClient(session) as client:
        http_client = client._http_client
    assert http_client.is_closed
