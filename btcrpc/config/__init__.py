"""Configuration module for btcrpc."""

from btcrpc.config.loader import get_config_path, load_config
from btcrpc.config.schema import ClientConfig

__all__ = ["ClientConfig", "load_config", "get_config_path"]
