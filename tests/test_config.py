from __future__ import annotations

import logging
import os
import stat

import pytest

from anytype.config import (
    AnytypeConfig,
    clear_api_key,
    filter_value_from_env,
    filter_value_from_yaml,
    load_api_key,
    load_config,
    save_api_key,
)
from anytype.env import LOG, JsonFormatter, setup_logging
from anytype.errors import ValidationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("ANYTYPE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("ANYTYPE_CONFIG_DIR", str(tmp_path))


def test_defaults() -> None:
    config = load_config()
    assert config == AnytypeConfig()
    assert config.api_key is None
    assert config.base_url == "http://localhost:31009"


def test_yaml_values_skip_unknown_and_null_keys() -> None:
    values = filter_value_from_yaml("base_url: http://x\ntimeout: 5\napi_key: null\nunrelated: 1\n")
    assert values == {"base_url": "http://x", "timeout": 5}
    assert filter_value_from_yaml("") == {}


def test_yaml_must_be_mapping() -> None:
    with pytest.raises(ValidationError):
        filter_value_from_yaml("- a\n- b\n")


def test_env_values_use_prefix(monkeypatch) -> None:
    monkeypatch.setenv("ANYTYPE_BASE_URL", "http://env")
    monkeypatch.setenv("BASE_URL", "http://ignored")
    assert filter_value_from_env() == {"base_url": "http://env"}


def test_precedence_yaml_then_key_file_then_env_then_overrides(tmp_path, monkeypatch) -> None:
    (tmp_path / "config.yaml").write_text("api_key: yaml-key\nbase_url: http://yaml\npage_size: 25\n")
    config = load_config()
    assert (config.api_key, config.base_url, config.page_size) == ("yaml-key", "http://yaml", 25)

    save_api_key("file-key")
    assert load_config().api_key == "file-key"

    monkeypatch.setenv("ANYTYPE_API_KEY", "env-key")
    monkeypatch.setenv("ANYTYPE_TIMEOUT", "2.5")
    config = load_config()
    assert config.api_key == "env-key"
    assert config.timeout == 2.5

    config = load_config(api_key="explicit", base_url=None)
    assert config.api_key == "explicit"
    assert config.base_url == "http://yaml"


def test_invalid_values_raise_validation_error(monkeypatch) -> None:
    monkeypatch.setenv("ANYTYPE_TIMEOUT", "soon")
    with pytest.raises(ValidationError, match="invalid configuration"):
        load_config()


def test_log_level_is_normalised_and_checked(monkeypatch) -> None:
    monkeypatch.setenv("ANYTYPE_LOG_LEVEL", " debug ")
    assert load_config().log_level == "DEBUG"

    monkeypatch.setenv("ANYTYPE_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="invalid configuration"):
        load_config()


def test_malformed_yaml_raises_validation_error(tmp_path) -> None:
    (tmp_path / "config.yaml").write_text("base_url: [unclosed\n")
    with pytest.raises(ValidationError, match="config.yaml"):
        load_config()


def test_api_key_store_round_trip(tmp_path) -> None:
    assert load_api_key() is None
    path = save_api_key("  secret \n")
    assert path == tmp_path / "api_key"
    assert load_api_key() == "secret"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert clear_api_key() is True
    assert clear_api_key() is False
    assert load_api_key() is None


def test_empty_api_key_not_saved() -> None:
    with pytest.raises(ValidationError):
        save_api_key("   ")


def test_setup_logging_replaces_handler() -> None:
    setup_logging("debug", "json")
    setup_logging("INFO", "text")
    assert len(LOG.handlers) == 1
    assert LOG.level == logging.INFO
    assert not isinstance(LOG.handlers[0].formatter, JsonFormatter)
    with pytest.raises(ValueError):
        setup_logging("INFO", "xml")


def test_json_formatter_emits_one_object() -> None:
    record = logging.LogRecord("anytype", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    line = JsonFormatter().format(record)
    assert '"message": "hello world"' in line
    assert '"level": "INFO"' in line
