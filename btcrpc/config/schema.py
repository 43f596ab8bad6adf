"""Configuration schema using Pydantic.

One immutable ClientConfig per client; values come from keyword arguments,
a JSON file (see loader) or BTCRPC_* environment variables.
"""

from __future__ import annotations

from urllib.parse import quote

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# URL delimiters that would move part of the host into the path, query or userinfo
_HOST_FORBIDDEN = frozenset("/?#@\\")


class ClientConfig(BaseSettings):
    """Connection settings for one bitcoind JSON-RPC endpoint."""
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    user: str
    password: SecretStr
    timeout: float | None = Field(default=None, gt=0)  # seconds; None waits forever
    validate_args: bool = True  # arity check against the registry before any I/O
    wallet: str | None = None  # multiwallet nodes: POST to /wallet/<name>

    model_config = SettingsConfigDict(
        env_prefix="BTCRPC_",
        frozen=True,
        extra="ignore",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("host must not be empty")
        bad = sorted({ch for ch in value if ch in _HOST_FORBIDDEN or ch.isspace()})
        if bad:
            raise ValueError(f"host must be a bare hostname or IP address, found {''.join(bad)!r}")
        return value

    @property
    def endpoint(self) -> str:
        host = f"[{self.host}]" if ":" in self.host and not self.host.startswith("[") else self.host
        base = f"http://{host}:{self.port}/"
        if self.wallet:
            return f"{base}wallet/{quote(self.wallet, safe='')}"
        return base

    def with_wallet(self, wallet: str | None) -> "ClientConfig":
        """Copy of this config targeting another wallet endpoint."""
        return self.model_copy(update={"wallet": wallet})
