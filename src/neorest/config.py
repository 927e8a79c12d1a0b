"""Client configuration and server profile loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from neorest.lib import oj

logger = logging.getLogger(__name__)

PRODUCT_NAME = "NeoRest"
CLIENT_VERSION = "0.1.0"

# Config file locations
SERVERS_CONFIG_FILENAME = "servers.json"
GLOBAL_SERVERS_CONFIG = Path.home() / ".neorest" / SERVERS_CONFIG_FILENAME
LOCAL_CONFIG_DIR = ".neorest"


def default_user_agent() -> str:
    """User agent in the form ``NeoRest/<major>.<minor>.<build>.<revision>``."""
    parts = [int(part) for part in CLIENT_VERSION.split(".")]
    parts.extend([0] * (4 - len(parts)))
    return f"{PRODUCT_NAME}/" + ".".join(str(part) for part in parts[:4])


@dataclass
class ExecutionConfiguration:
    """Settings applied to every request the client sends."""

    use_json_streaming: bool = True
    """Send ``X-Stream: true`` so the server streams result payloads."""

    user_agent: str = field(default_factory=default_user_agent)
    """Value of the User-Agent header."""

    username: str | None = None
    password: str | None = None

    timeout: float = 100.0
    """Read timeout in seconds for the default transport."""

    connect_timeout: float = 10.0
    """Connection establishment timeout in seconds for the default transport."""

    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.user_agent:
            raise ValueError("user_agent is required")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if self.password is not None and self.username is None:
            raise ValueError("password given without username")

    @property
    def has_credentials(self) -> bool:
        """True when a username is configured."""
        return self.username is not None


@dataclass
class ServerProfile:
    """A named server entry from a servers.json file."""

    name: str
    url: str
    username: str | None = None
    password: str | None = None
    use_json_streaming: bool = True

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "ServerProfile":
        """Create from config dict."""
        return cls(
            name=name,
            url=data.get("url", ""),
            username=data.get("username"),
            password=data.get("password"),
            use_json_streaming=data.get("use_json_streaming", True),
        )

    def to_execution_configuration(self) -> ExecutionConfiguration:
        """Build the execution configuration this profile describes."""
        return ExecutionConfiguration(
            use_json_streaming=self.use_json_streaming,
            username=self.username,
            password=self.password,
        )


def _read_profiles(path: Path) -> dict[str, ServerProfile]:
    profiles: dict[str, ServerProfile] = {}
    try:
        data = oj.loads(path.read_bytes())
    except (OSError, oj.JSONDecodeError) as e:
        logger.warning(f"Skipping unreadable server config {path}: {e}")
        return profiles

    servers = data.get("servers", {}) if isinstance(data, dict) else None
    if not isinstance(servers, dict):
        logger.warning(f"Skipping server config {path}: 'servers' must be an object")
        return profiles

    for name, server_data in servers.items():
        if isinstance(server_data, dict) and server_data.get("url"):
            profiles[name] = ServerProfile.from_dict(name, server_data)
        else:
            logger.debug(f"Ignoring server entry {name!r} in {path}: no url")
    return profiles


def load_server_profiles(
    working_dir: Path | None = None,
    global_config: Path = GLOBAL_SERVERS_CONFIG,
) -> dict[str, ServerProfile]:
    """Load server profiles from global and local config files.

    Global config (~/.neorest/servers.json) is loaded first.
    Local config ({working_dir}/.neorest/servers.json) overrides global.

    Returns:
        Dict mapping profile name to profile.
    """
    profiles: dict[str, ServerProfile] = {}

    if global_config.exists():
        profiles.update(_read_profiles(global_config))

    if working_dir:
        local_config = working_dir / LOCAL_CONFIG_DIR / SERVERS_CONFIG_FILENAME
        if local_config.exists():
            profiles.update(_read_profiles(local_config))

    return profiles
