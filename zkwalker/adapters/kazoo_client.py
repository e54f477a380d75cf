"""Kazoo-backed TreeClient.

Wraps a ``kazoo.client.KazooClient`` session and exposes the four calls the
walker needs. Establishing the session (server list, timeout, credentials)
lives here too, so the walker never sees how it was connected.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from kazoo.client import KazooClient
from kazoo.exceptions import KazooException
from kazoo.handlers.threading import KazooTimeoutError

from ..core.client import TreeClient
from ..core.errors import AuthenticationError, WalkerConnectionError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DIGEST_SCHEME = "digest"


class KazooTreeClient(TreeClient):
    """TreeClient over a started KazooClient.

    Example:
        >>> with KazooTreeClient.connect(["zk1:2181", "zk2:2181"], auth="user:pass") as client:
        ...     ZnodeWalker(client).walk("/", print_znode_path, all_children)
    """

    def __init__(self, zk: KazooClient):
        """Initialize with a KazooClient.

        Args:
            zk: A KazooClient, normally already started
        """
        self._zk = zk
        self._closed = False

    @classmethod
    def connect(cls,
                servers: Sequence[str],
                timeout: float = DEFAULT_TIMEOUT,
                auth: Optional[str] = None) -> "KazooTreeClient":
        """Start a session and optionally attach a digest credential.

        Args:
            servers: ``host:port`` addresses of the ensemble
            timeout: Session and connect timeout in seconds
            auth: ``user:pass`` for the digest scheme, or None

        Returns:
            A connected KazooTreeClient

        Raises:
            WalkerConnectionError: If the session can't be established
            AuthenticationError: If the credential is rejected
        """
        hosts = ",".join(servers)
        try:
            zk = KazooClient(hosts=hosts, timeout=timeout)
        except ValueError as e:
            # kazoo parses host:port pairs eagerly
            raise WalkerConnectionError(f"Invalid server list {hosts}: {e}") from e

        try:
            zk.start(timeout=timeout)
        except (KazooTimeoutError, KazooException, ValueError) as e:
            zk.close()
            raise WalkerConnectionError(f"Can't connect to {hosts}: {e}") from e
        logger.debug("Connected to %s", hosts)

        client = cls(zk)
        if auth:
            try:
                client.add_auth(DIGEST_SCHEME, auth)
            except AuthenticationError:
                client.close()
                raise
        return client

    def get(self, path: str) -> Tuple[bytes, Any]:
        return self._zk.get(path)

    def get_children(self, path: str) -> Tuple[List[str], Any]:
        return self._zk.get_children(path, include_data=True)

    def add_auth(self, scheme: str, credential: Union[bytes, str]) -> None:
        if isinstance(credential, bytes):
            credential = credential.decode("utf-8")
        try:
            self._zk.add_auth(scheme, credential)
        except KazooException as e:
            raise AuthenticationError(scheme, str(e) or type(e).__name__) from e
        logger.debug("Attached %s credential", scheme)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._zk.stop()
        self._zk.close()
