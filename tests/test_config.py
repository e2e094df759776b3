import logging

import pytest

from fulcrum_mcp import config
from fulcrum_mcp.config import DEFAULT_BASE_URL, Settings, configure_logging, init_runtime, normalize_token


def test_from_env_defaults():
    s = Settings.from_env(env={})
    assert s.api_token == ""
    assert s.base_url == DEFAULT_BASE_URL
    assert s.timeout == 30.0
    assert s.http_port == 3000
    assert s.has_token is False


def test_from_env_reads_values_and_strips_trailing_slash():
    s = Settings.from_env(env={
        "FULCRUM_API_TOKEN": "  abc123 ",
        "FULCRUM_API_URL": "https://example.test/",
        "FULCRUM_TIMEOUT": "5",
        "PORT": "8080",
        "LOG_LEVEL": "debug",
    })
    assert s.api_token == "abc123"
    assert s.base_url == "https://example.test"
    assert s.timeout == 5.0
    assert s.http_port == 8080
    assert s.log_level == "DEBUG"
    assert s.auth_header == "Bearer abc123"


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("FULCRUM_API_TOKEN", "from-env")
    monkeypatch.setenv("FULCRUM_API_URL", "https://env.test")
    s = Settings.from_env(dotenv=False)
    assert s.api_token == "from-env"
    assert s.base_url == "https://env.test"


def test_bearer_prefix_is_normalized():
    assert normalize_token("Bearer xyz") == "xyz"
    assert normalize_token("bearer   xyz ") == "xyz"
    assert normalize_token(None) == ""
    assert Settings(api_token=normalize_token("Bearer t")).auth_header == "Bearer t"


def test_missing_token_warns_but_builds(caplog):
    with caplog.at_level(logging.WARNING, logger="fulcrum_mcp"):
        s = init_runtime(env={})
    assert not s.has_token
    assert "FULCRUM_API_TOKEN" in caplog.text


def test_from_env_does_not_log(caplog):
    with caplog.at_level(logging.DEBUG, logger="fulcrum_mcp"):
        Settings.from_env(env={})
    assert caplog.records == []


def test_missing_token_warning_comes_after_logging_setup(monkeypatch):
    events = []

    class _Recorder(logging.Handler):
        def emit(self, record):
            events.append(("log", record.getMessage()))

    monkeypatch.setattr(config, "configure_logging", lambda level: events.append(("configure", level)))
    recorder = _Recorder()
    config.logger.addHandler(recorder)
    try:
        config.init_runtime(env={"LOG_LEVEL": "debug"})
    finally:
        config.logger.removeHandler(recorder)

    assert events[0] == ("configure", "DEBUG")
    assert events[1][0] == "log"
    assert "FULCRUM_API_TOKEN" in events[1][1]


def test_init_runtime_with_token_is_quiet(caplog):
    with caplog.at_level(logging.WARNING, logger="fulcrum_mcp"):
        s = init_runtime(env={"FULCRUM_API_TOKEN": "abc"})
    assert s.has_token
    assert caplog.records == []


@pytest.mark.parametrize("name,value", [("FULCRUM_TIMEOUT", "soon"), ("PORT", "http")])
def test_invalid_numbers_name_the_variable(name, value):
    with pytest.raises(ValueError, match=name):
        Settings.from_env(env={name: value})


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        configure_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)
