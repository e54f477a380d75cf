"""zkwalker - depth-first walks over ZooKeeper namespaces.

A walk visits each znode in pre-order and hands it to two pluggable
strategies: a node processor, which may lazily read the znode content and
may prune its subtree, and a children processor, which picks the children
to descend into.

━━━━━━━━━━━━━━━━━━━━━━━━━━
    from zkwalker import connect, walk, print_znode_path_and_content, all_children

    with connect(["localhost:2181"]) as client:
        walk(client, "/", print_znode_path_and_content, all_children)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    WalkerError,
    WalkerConnectionError,
    AuthenticationError,
    ChildrenListingError,
    ConfigError,
    TreeClient,
    join_path,
    ZnodeReader,
    Walker,
    ZnodeWalker,
    IterativeZnodeWalker,
    create_walker,
    ZnodeProcessor,
    ChildrenProcessor,
    PrintZnodePath,
    PrintZnodePathAndContent,
    NodeFunctionProcessor,
    AllChildren,
    NoChildren,
    StrictChildren,
    FilteredChildren,
    print_znode_path,
    print_znode_path_and_content,
    all_children,
    no_children,
    strict_children,
)
from .adapters import KazooTreeClient
from .config import WalkerConfig
from .api import connect, walk, walk_tree

__all__ = [
    "__version__",
    # Core
    'WalkerError',
    'WalkerConnectionError',
    'AuthenticationError',
    'ChildrenListingError',
    'ConfigError',
    'TreeClient',
    'join_path',
    'ZnodeReader',
    'Walker',
    'ZnodeWalker',
    'IterativeZnodeWalker',
    'create_walker',
    # Processors
    'ZnodeProcessor',
    'ChildrenProcessor',
    'PrintZnodePath',
    'PrintZnodePathAndContent',
    'NodeFunctionProcessor',
    'AllChildren',
    'NoChildren',
    'StrictChildren',
    'FilteredChildren',
    'print_znode_path',
    'print_znode_path_and_content',
    'all_children',
    'no_children',
    'strict_children',
    # Adapters
    'KazooTreeClient',
    # Config / API
    'WalkerConfig',
    'connect',
    'walk',
    'walk_tree',
]
