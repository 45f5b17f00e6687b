import pytest
import requests

from llm_summarizer_lib.config import ProviderConfig
from llm_summarizer_lib.data_models.constants import (
    ENV_API_KEY,
    ENV_API_VERSION,
    ENV_DEPLOYMENT,
    ENV_ENDPOINT,
    ENV_MAX_TOKENS,
    ENV_TEMPERATURE,
    ENV_TIMEOUT,
)


class FakeResponse:
    def __init__(self, status_code, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class UpstreamStub:
    """Replaces ``requests.Session.post`` and records every call."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    def __call__(self, session, url, json=None, timeout=None, **kwargs):
        self.calls.append(
            {
                "url": url,
                "json": json,
                "timeout": timeout,
                "headers": dict(session.headers),
            }
        )
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def provider_config():
    return ProviderConfig(
        endpoint="https://example.openai.azure.com/",
        api_key="secret-key",
        deployment="gpt-4o-mini",
        api_version="2024-10-21",
        timeout=12,
    )


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        ENV_ENDPOINT,
        ENV_API_KEY,
        ENV_DEPLOYMENT,
        ENV_API_VERSION,
        ENV_TIMEOUT,
        ENV_TEMPERATURE,
        ENV_MAX_TOKENS,
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def upstream(monkeypatch):
    def _install(response):
        stub = UpstreamStub(response)

        def fake_post(session, url, **kwargs):
            return stub(session, url, **kwargs)

        monkeypatch.setattr(requests.Session, "post", fake_post)
        return stub

    return _install
