"""High-level API for zkwalker.

Simple functional entry points wrapping the client and walker classes for
the common cases: connect, walk, or both in one call.
"""

from typing import Optional, Sequence

from .adapters.kazoo_client import DEFAULT_TIMEOUT, KazooTreeClient
from .config import WalkerConfig
from .core.client import TreeClient
from .core.processors import all_children, print_znode_path
from .core.walker import ChildrenProcessorFn, NodeProcessorFn, create_walker


def connect(servers: Sequence[str],
            timeout: float = DEFAULT_TIMEOUT,
            auth: Optional[str] = None) -> KazooTreeClient:
    """Connect to a ZooKeeper ensemble.

    Args:
        servers: ``host:port`` addresses
        timeout: Session timeout in seconds
        auth: Optional ``user:pass`` digest credential

    Returns:
        Connected client; close it (or use it as a context manager) when done
    """
    return KazooTreeClient.connect(servers, timeout=timeout, auth=auth)


def walk(client: TreeClient,
         path: str = "/",
         znode_processor: NodeProcessorFn = print_znode_path,
         children_processor: ChildrenProcessorFn = all_children,
         strategy: str = "recursive") -> None:
    """Walk the tree rooted at path with an existing client.

    Example:
        >>> with connect(["localhost:2181"]) as client:
        ...     walk(client, "/brokers")
    """
    create_walker(strategy, client).walk(path, znode_processor, children_processor)


def walk_tree(config: WalkerConfig,
              znode_processor: Optional[NodeProcessorFn] = None,
              children_processor: ChildrenProcessorFn = all_children) -> None:
    """Connect, walk and disconnect according to a WalkerConfig.

    The node processor defaults to the one selected by
    ``config.print_content``.

    Raises:
        ConfigError: If the config is invalid
        WalkerConnectionError: If the ensemble can't be reached
        AuthenticationError: If the credential is rejected
    """
    config.validate()
    if znode_processor is None:
        znode_processor = config.znode_processor()

    with connect(config.servers, timeout=config.timeout, auth=config.auth) as client:
        walk(client, config.root, znode_processor, children_processor, config.strategy)
