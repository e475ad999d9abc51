"""
Runtime Configuration

Central configuration for the upstream API client and the telephony
integration it serves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class HttpConfig:
    """Configuration for the HTTP client."""
    timeout: Optional[float] = None
    allow_insecure_tls: bool = False


@dataclass
class TelnyxConfig:
    """Credentials for the Telnyx voice API."""
    api_key: Optional[str] = None
    connection_id: Optional[str] = None
    caller_id: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (and a ``.env`` file)
    - YAML file
    - Programmatic construction
    """
    environment: str = "production"
    api_base_url: str = ""
    base_url: str = ""
    admin_token: Optional[str] = None
    log_level: str = "INFO"
    http: HttpConfig = field(default_factory=HttpConfig)
    telnyx: TelnyxConfig = field(default_factory=TelnyxConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - API_BASE_URL: Base address of the upstream API
        - BASE_URL: Public base URL of this server
        - ADMIN_TOKEN: Token for the admin endpoints
        - TELNYX_API_KEY / TELNYX_CONNECTION_ID / TELNYX_CALLER_ID
        - IVR_ENV: Deployment environment (production, development, test)
        - IVR_LOG_LEVEL: Log level
        - IVR_HTTP_TIMEOUT: Default request timeout in seconds
        - IVR_ALLOW_INSECURE_TLS: Skip TLS verification in development (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv("IVR_ENV"):
            overrides["environment"] = os.getenv("IVR_ENV")
        if os.getenv("API_BASE_URL"):
            overrides["api_base_url"] = os.getenv("API_BASE_URL")
        if os.getenv("BASE_URL"):
            overrides["base_url"] = os.getenv("BASE_URL")
        if os.getenv("ADMIN_TOKEN"):
            overrides["admin_token"] = os.getenv("ADMIN_TOKEN")
        if os.getenv("IVR_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("IVR_LOG_LEVEL")

        # HTTP settings
        if os.getenv("IVR_HTTP_TIMEOUT"):
            overrides.setdefault("http", {})["timeout"] = float(os.getenv("IVR_HTTP_TIMEOUT"))
        if os.getenv("IVR_ALLOW_INSECURE_TLS"):
            overrides.setdefault("http", {})["allow_insecure_tls"] = _env_flag(
                "IVR_ALLOW_INSECURE_TLS"
            )

        # Telnyx
        if os.getenv("TELNYX_API_KEY"):
            overrides.setdefault("telnyx", {})["api_key"] = os.getenv("TELNYX_API_KEY")
        if os.getenv("TELNYX_CONNECTION_ID"):
            overrides.setdefault("telnyx", {})["connection_id"] = os.getenv("TELNYX_CONNECTION_ID")
        if os.getenv("TELNYX_CALLER_ID"):
            overrides.setdefault("telnyx", {})["caller_id"] = os.getenv("TELNYX_CALLER_ID")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        http_data = data.get("http", {})
        telnyx_data = data.get("telnyx", {})

        http = HttpConfig(**http_data) if http_data else HttpConfig()
        telnyx = TelnyxConfig(**telnyx_data) if telnyx_data else TelnyxConfig()

        return cls(
            environment=data.get("environment", "production"),
            api_base_url=data.get("api_base_url", ""),
            base_url=data.get("base_url", ""),
            admin_token=data.get("admin_token"),
            log_level=data.get("log_level", "INFO"),
            http=http,
            telnyx=telnyx,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        for section in ("http", "telnyx"):
            for key, value in overrides.pop(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        for key, value in overrides.items():
            setattr(new_config, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "environment": self.environment,
            "api_base_url": self.api_base_url,
            "base_url": self.base_url,
            "admin_token": self.admin_token,
            "log_level": self.log_level,
            "http": {
                "timeout": self.http.timeout,
                "allow_insecure_tls": self.http.allow_insecure_tls,
            },
            "telnyx": {
                "api_key": self.telnyx.api_key,
                "connection_id": self.telnyx.connection_id,
                "caller_id": self.telnyx.caller_id,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set (or clear, with None) the default runtime configuration."""
    global _default_config
    _default_config = config
