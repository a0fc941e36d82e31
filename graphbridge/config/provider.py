"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass
class BridgeConfig:
    """Graph CLI bridge configuration."""
    executable_name: str
    process_timeout: int
    login_timeout: int
    login_command: str
    client_id_env: str
    extra_paths: List[str] = field(default_factory=list)
    retry_when_skipped: bool = False


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    log_level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_bridge_config(self) -> BridgeConfig:
        """Get bridge configuration."""
        ...

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...


def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be a positive number of seconds, got {value}")
    return value


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_bridge_config(self) -> BridgeConfig:
        """Get bridge configuration from environment variables."""
        extra_paths_env: Optional[str] = os.getenv("MGC_EXTRA_PATHS")
        extra_paths = [p.strip() for p in extra_paths_env.split(os.pathsep)] if extra_paths_env else []

        return BridgeConfig(
            executable_name=os.getenv("MGC_EXECUTABLE_NAME", "mgc"),
            process_timeout=_positive_int("MGC_PROCESS_TIMEOUT", "300"),
            login_timeout=_positive_int("MGC_LOGIN_TIMEOUT", "60"),
            login_command=os.getenv("MGC_LOGIN_COMMAND", "login --strategy Environment"),
            client_id_env=os.getenv("MGC_CLIENT_ID_ENV", "AZURE_CLIENT_ID"),
            extra_paths=[p for p in extra_paths if p],
            retry_when_skipped=os.getenv("MGC_AUTH_RETRY_SKIPPED", "false").lower() == "true",
        )

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=int(os.getenv("API_PORT", "8080")),
            host=os.getenv("API_HOST", "0.0.0.0"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
