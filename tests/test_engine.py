import pytest

from flask import Flask

from llm_summarizer_api.core.engine import FlaskEngine, create_app
from llm_summarizer_api.core.errors import error_as_dict
from llm_summarizer_api.endpoints.endpoint_i import EndpointI
from llm_summarizer_api.register.register import FlaskEndpointRegistrar
from llm_summarizer_api.rest_api import _parse_args, choose_server


class EchoEndpoint(EndpointI):
    def __init__(self, ep_name="echo", method="POST"):
        super().__init__(ep_name=ep_name, method=method)

    def run_ep(self, params):
        return self.return_response_ok({"echo": params})


class BrokenEndpoint(EndpointI):
    def __init__(self):
        super().__init__(ep_name="broken")

    def run_ep(self, params):
        raise RuntimeError("kaboom")


def test_default_app_exposes_summarize():
    app = create_app()
    rules = {(r.rule, m) for r in app.url_map.iter_rules() for m in r.methods}

    assert ("/api/summarize", "POST") in rules


def test_registrar_rejects_duplicates():
    registrar = FlaskEndpointRegistrar(app=Flask(__name__), url_prefix="api")
    registrar.register_endpoint(EchoEndpoint())

    with pytest.raises(RuntimeError):
        registrar.register_endpoint(EchoEndpoint())

    assert registrar.registered_rules == {("/api/echo", "POST")}


def test_registrar_requires_target():
    with pytest.raises(ValueError):
        FlaskEndpointRegistrar()


def test_unhandled_endpoint_error_becomes_500():
    app = FlaskEngine(endpoints=[BrokenEndpoint()]).prepare_flask_app()

    resp = app.test_client().post("/api/broken", json={})

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "internal_error", "detail": "kaboom"}


def test_endpoint_receives_json_body():
    app = FlaskEngine(endpoints=[EchoEndpoint()], url_prefix="").prepare_flask_app()

    resp = app.test_client().post("/echo", data='{"a": 1}', content_type="text/plain")

    assert resp.get_json() == {"echo": {"a": 1}}


@pytest.mark.parametrize("method", ["GET", "DELETE"])
def test_unsupported_method(method):
    with pytest.raises(ValueError):
        EchoEndpoint(method=method)


def test_error_as_dict():
    assert error_as_dict("bad") == {"error": "bad"}
    assert error_as_dict("bad", "why") == {"error": "bad", "detail": "why"}


@pytest.mark.parametrize(
    "argv, expected",
    [(["--gunicorn"], "gunicorn"), (["--waitress"], "waitress"), ([], "flask")],
)
def test_choose_server(argv, expected, monkeypatch):
    monkeypatch.setattr("llm_summarizer_api.rest_api.SERVER_TYPE", "flask")

    assert choose_server(_parse_args(argv)) == expected


def test_parse_args_overrides():
    args = _parse_args(["--host", "127.0.0.1", "--port", "9000", "--threads", "3"])

    assert (args.host, args.port, args.threads) == ("127.0.0.1", 9000, 3)
