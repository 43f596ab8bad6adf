"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from btcrpc.config.schema import ClientConfig

# bitcoin.conf option name -> ClientConfig field
BITCOIN_CONF_KEYS: dict[str, str] = {
    "rpcconnect": "host",
    "rpcport": "port",
    "rpcuser": "user",
    "rpcpassword": "password",
    "rpcwallet": "wallet",
    "rpcclienttimeout": "timeout",
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".btcrpc" / "config.json"


def load_config(config_path: Path | None = None, **overrides: Any) -> ClientConfig:
    """
    Load client configuration.

    Args:
        config_path: Optional path to a JSON config file. Uses default if not provided.
        overrides: Field values that win over the file and the environment.

    Returns:
        Validated, immutable configuration.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path) as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to load config from {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Failed to load config from {path}: expected a JSON object")
        data = _migrate_config(convert_keys(raw))

    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ClientConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid config ({path}): {e}") from e


def _migrate_config(data: dict[str, Any]) -> dict[str, Any]:
    """Accept bitcoin.conf style keys; explicit field names win."""
    migrated = dict(data)
    for conf_key, field_name in BITCOIN_CONF_KEYS.items():
        if conf_key in migrated:
            value = migrated.pop(conf_key)
            migrated.setdefault(field_name, value)
    return migrated


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
