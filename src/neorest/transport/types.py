"""Transport layer types and configuration."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class TransportEventType(Enum):
    """Types of transport events for observability."""

    REQUEST_SENT = auto()
    RESPONSE_RECEIVED = auto()
    ERROR = auto()
    CLOSED = auto()


@dataclass
class TransportEvent:
    """Event emitted by transport for observability."""

    type: TransportEventType
    timestamp: float
    data: dict[str, Any] | None = None
    error: Exception | None = None

    def __str__(self) -> str:
        base = f"[{self.type.name}]"
        if self.data:
            base += f" {self.data}"
        if self.error:
            base += f" error={self.error}"
        return base


@dataclass
class TransportConfig:
    """Configuration for the HTTP transport."""

    timeout: float = 100.0
    """Read, write and pool timeout in seconds."""

    connect_timeout: float = 10.0
    """Connection establishment timeout in seconds."""

    headers: dict[str, str] = field(default_factory=dict)
    """Headers added to every request."""

    verify_ssl: bool = True
    """Whether to verify TLS certificates."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
