"""Settings and bootstrap — environment loading, validation, CLI overrides."""

import logging

import pytest
from pydantic import ValidationError

from luhn_server.__main__ import build_settings, parse_args
from luhn_server.config import Settings
from luhn_server.main import create_app
import luhn_server.routes as routes_module


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.server_port == 8080
    assert settings.strict_digits is True
    assert settings.log_level == "INFO"
    assert settings.is_development


def test_environment_variables_override(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "9090")
    monkeypatch.setenv("STRICT_DIGITS", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.server_port == 9090
    assert settings.strict_digits is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_port_out_of_range(port):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, server_port=port)


@pytest.mark.parametrize("field,value", [
    ("env", "staging"),
    ("log_level", "LOUD"),
    ("log_format", "xml"),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_production_rejects_debug():
    with pytest.raises(ValueError):
        Settings(_env_file=None, env="production", debug=True)


def test_cli_overrides_settings(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "9090")

    settings = build_settings(parse_args(["--port", "7000", "--host", "127.0.0.1"]))

    assert settings.server_port == 7000
    assert settings.server_host == "127.0.0.1"


def test_cli_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "9090")

    settings = build_settings(parse_args([]))

    assert settings.server_port == 9090


async def test_only_the_validation_route_is_served(client):
    assert (await client.get("/")).status_code == 405

    for path in ["/validate", "/docs", "/redoc", "/openapi.json", "/health"]:
        assert (await client.get(path)).status_code == 404, path

    response = await client.post("/validate", json={"number": "4003600000000014"})
    assert response.status_code == 404


def test_create_app_keeps_settings_on_state():
    settings = Settings(_env_file=None, log_format="text", strict_digits=False)

    app = create_app(settings)

    assert app.state.settings is settings


def test_rebuilding_app_switches_log_renderer(caplog):
    create_app(Settings(_env_file=None, log_format="json", log_level="INFO"))
    caplog.set_level(logging.INFO)
    routes_module.logger.info("renderer_check")
    assert caplog.records[-1].getMessage().startswith("{")

    create_app(Settings(_env_file=None, log_format="text", log_level="INFO"))
    caplog.set_level(logging.INFO)
    routes_module.logger.info("renderer_check")
    message = caplog.records[-1].getMessage()
    assert "renderer_check" in message
    assert not message.startswith("{")
