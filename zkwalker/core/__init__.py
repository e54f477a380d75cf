"""Core components of zkwalker: client contract, lazy reader, walkers and processors."""

from .errors import (
    WalkerError,
    WalkerConnectionError,
    AuthenticationError,
    ChildrenListingError,
    ConfigError,
)
from .client import TreeClient, join_path
from .reader import ZnodeReader
from .walker import (
    Walker,
    ZnodeWalker,
    IterativeZnodeWalker,
    create_walker,
    WALKER_STRATEGIES,
)
from .processors import (
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

__all__ = [
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
    'WALKER_STRATEGIES',
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
]
