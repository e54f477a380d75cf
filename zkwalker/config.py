"""Configuration for zkwalker.

Describes where to connect, how to authenticate and how to walk, so the CLI
and library callers can build a walk from one object.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .adapters.kazoo_client import DEFAULT_TIMEOUT
from .core.errors import ConfigError
from .core.processors import print_znode_path, print_znode_path_and_content
from .core.walker import WALKER_STRATEGIES


@dataclass
class WalkerConfig:
    """Complete configuration for a walk."""

    servers: List[str] = field(default_factory=list)
    auth: Optional[str] = None       # user:pass for the digest scheme
    root: str = "/"
    print_content: bool = False
    timeout: float = DEFAULT_TIMEOUT
    strategy: str = "recursive"

    @classmethod
    def from_connection_string(cls, connection_string: str, **kwargs) -> "WalkerConfig":
        """Build a config from ``host1:port1,...,hostN:portN``.

        Blank entries are dropped. Remaining keyword arguments are passed
        through to the dataclass.
        """
        servers = [s.strip() for s in connection_string.split(",") if s.strip()]
        return cls(servers=servers, **kwargs)

    def validate(self) -> None:
        """Validate configuration consistency.

        Raises:
            ConfigError: If configuration is invalid
        """
        if not self.servers:
            raise ConfigError("at least one server address is required")

        for server in self.servers:
            _check_server(server)

        if not self.root.startswith("/"):
            raise ConfigError(f"root must be an absolute znode path, got {self.root!r}")

        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

        if self.strategy.lower() not in WALKER_STRATEGIES:
            raise ConfigError(
                f"unknown walk strategy {self.strategy!r}, "
                f"choose from: {', '.join(WALKER_STRATEGIES)}"
            )

        if self.auth and ":" not in self.auth:
            raise ConfigError("auth must be given as <username:password>")

    def znode_processor(self):
        """Return the built-in node processor selected by print_content."""
        if self.print_content:
            return print_znode_path_and_content
        return print_znode_path


def _check_server(server: str) -> None:
    """Reject entries that aren't ``host`` or ``host:port``.

    A chroot suffix (``host:2181/app``) is allowed, as kazoo accepts it.
    """
    address = server.split("/", 1)[0]
    host, sep, port = address.rpartition(":")
    if not sep:
        host, port = address, None
    if not host:
        raise ConfigError(f"server address {server!r} has no host")
    if port is not None and not (port.isdigit() and 0 < int(port) < 65536):
        raise ConfigError(f"server address {server!r} has an invalid port {port!r}")
