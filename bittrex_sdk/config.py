"""Client configuration and credentials."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

API_BASE = "https://bittrex.com/api/"
API_VERSION = "v1.1"
DEFAULT_TIMEOUT = 30.0


class Credentials(BaseModel):
    """API key pair used to sign authenticated requests."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    api_secret: SecretStr = SecretStr("")

    def has_keys(self) -> bool:
        """Check whether both the key and the secret are set."""
        return bool(self.api_key) and bool(self.api_secret.get_secret_value())


class ClientConfig(BaseModel):
    """Immutable settings shared by every request a client makes."""

    model_config = ConfigDict(frozen=True)

    credentials: Credentials = Field(default_factory=Credentials)
    base_url: str = API_BASE
    api_version: str = API_VERSION
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @property
    def endpoint(self) -> str:
        """Root URL that every resource path is appended to."""
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return f"{base}{self.api_version}/"

    @classmethod
    def from_env(cls, prefix: str = "BITTREX_", environ: Optional[dict[str, str]] = None) -> "ClientConfig":
        """
        Build a config from environment variables.

        Reads ``<prefix>API_KEY``, ``<prefix>API_SECRET`` and, when present,
        ``<prefix>BASE_URL`` and ``<prefix>TIMEOUT``.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of ``os.environ``

        Returns:
            A new ClientConfig
        """
        env = os.environ if environ is None else environ
        settings: dict = {
            "credentials": Credentials(
                api_key=env.get(f"{prefix}API_KEY", ""),
                api_secret=env.get(f"{prefix}API_SECRET", ""),
            )
        }
        if env.get(f"{prefix}BASE_URL"):
            settings["base_url"] = env[f"{prefix}BASE_URL"]
        if env.get(f"{prefix}TIMEOUT"):
            settings["timeout"] = float(env[f"{prefix}TIMEOUT"])
        return cls(**settings)
