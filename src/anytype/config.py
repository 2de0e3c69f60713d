import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

ENV_PREFIX = "ANYTYPE_"
CONFIG_DIR_ENV = "ANYTYPE_CONFIG_DIR"
CONFIG_FILE_NAME = "config.yaml"
API_KEY_FILE_NAME = "api_key"


class AnytypeConfig(BaseModel):
    api_key: Optional[str] = None
    base_url: str = "http://localhost:31009"
    api_version: str = "2025-05-20"
    timeout: float = 30

    # Pagination
    page_size: Optional[int] = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    logging_format: Literal["text", "json"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


def default_config_dir() -> Path:
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "anytype"


def filter_value_from_env() -> dict[str, Any]:
    config_keys = AnytypeConfig.model_fields.keys()
    env_already_keys = {}
    for key in config_keys:
        value = os.getenv(f"{ENV_PREFIX}{key.upper()}", None)
        if value is None:
            continue
        env_already_keys[key] = value
    return env_already_keys


def filter_value_from_yaml(yaml_string) -> dict[str, Any]:
    yaml_config_data: dict | None = yaml.safe_load(yaml_string)
    if yaml_config_data is None:
        return {}
    if not isinstance(yaml_config_data, dict):
        raise ValidationError("config file must contain a YAML mapping")

    yaml_already_keys = {}
    config_keys = AnytypeConfig.model_fields.keys()
    for key in config_keys:
        value = yaml_config_data.get(key, None)
        if value is None:
            continue
        yaml_already_keys[key] = value
    return yaml_already_keys


def load_api_key(config_dir: Path | None = None) -> str | None:
    path = (config_dir or default_config_dir()) / API_KEY_FILE_NAME
    if not path.is_file():
        return None
    key = path.read_text(encoding="utf-8").strip()
    return key or None


def save_api_key(api_key: str, config_dir: Path | None = None) -> Path:
    key = (api_key or "").strip()
    if not key:
        raise ValidationError("API key must not be empty")
    path = (config_dir or default_config_dir()) / API_KEY_FILE_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(key + "\n", encoding="utf-8")
    os.chmod(path, 0o600)
    return path


def clear_api_key(config_dir: Path | None = None) -> bool:
    path = (config_dir or default_config_dir()) / API_KEY_FILE_NAME
    if not path.exists():
        return False
    path.unlink()
    return True


def load_config(config_dir: Path | None = None, **overrides: Any) -> AnytypeConfig:
    """Build the effective configuration.

    Precedence, lowest first: ``config.yaml``, the stored ``api_key`` file,
    ``ANYTYPE_*`` environment variables, then keyword overrides whose value
    is not ``None``.
    """
    config_dir = config_dir or default_config_dir()
    values: dict[str, Any] = {}

    config_file = config_dir / CONFIG_FILE_NAME
    try:
        if config_file.is_file():
            values.update(filter_value_from_yaml(config_file.read_text(encoding="utf-8")))
        stored_key = load_api_key(config_dir)
    except yaml.YAMLError as e:
        raise ValidationError(f"invalid {config_file}: {e}") from e
    except OSError as e:
        raise ValidationError(f"cannot read configuration in {config_dir}: {e}") from e
    if stored_key:
        values["api_key"] = stored_key

    values.update(filter_value_from_env())
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return AnytypeConfig.model_validate(values)
    except PydanticValidationError as e:
        raise ValidationError(f"invalid configuration: {e}") from e
