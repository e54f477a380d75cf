"""Walking strategies for zkwalker.

Walkers drive a TreeClient and two processors through a znode tree in
depth-first pre-order. They are independent of how the client talks to the
server, and of what the processors do with each node.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from .client import TreeClient, join_path
from .reader import ZnodeReader

logger = logging.getLogger(__name__)

NodeProcessorFn = Callable[[str, ZnodeReader], bool]
ChildrenProcessorFn = Callable[..., Sequence[str]]


class Walker(ABC):
    """Abstract base class for znode walkers.

    Contract shared by all walkers:

    - Each visited znode is handed to the node processor before its children
      are listed, and a child's whole subtree is finished before the next
      sibling is entered.
    - Content is only read if the node processor calls its reader.
    - A truthy result from the node processor prunes the subtree: the znode
      is not even listed.
    - The children processor alone decides what to do with a listing error.
    - Anything raised by a processor stops the walk and propagates unchanged.
    """

    def __init__(self, client: TreeClient):
        """Initialize walker with a client.

        Args:
            client: TreeClient for reading and listing znodes
        """
        self.client = client

    @abstractmethod
    def walk(self,
             path: str,
             znode_processor: NodeProcessorFn,
             children_processor: ChildrenProcessorFn) -> None:
        """Walk the znode tree rooted at path.

        Args:
            path: Absolute path of the first znode to visit
            znode_processor: Called as ``(path, reader)`` for every znode
            children_processor: Called as ``(path, children, stat, error)``
                for every znode that was not skipped

        Raises:
            Whatever either processor raises.
        """
        pass

    def _enter(self, path: str, znode_processor: NodeProcessorFn) -> bool:
        """Run the node processor; True means descend."""
        logger.debug("Visiting %s", path)
        skip = znode_processor(path, ZnodeReader(self.client, path))
        if skip:
            logger.debug("Skipping children of %s", path)
            return False
        return True

    def _select_children(self, path: str, children_processor: ChildrenProcessorFn) -> List[str]:
        """List a znode once and let the children processor pick from it."""
        children: Optional[List[str]] = None
        stat = None
        error: Optional[Exception] = None
        try:
            children, stat = self.client.get_children(path)
        except Exception as e:
            error = e
        selected = children_processor(path, children, stat, error)
        return list(selected or [])


class ZnodeWalker(Walker):
    """Recursive depth-first pre-order walker.

    Recursion depth equals tree depth, which is fine for ZooKeeper
    namespaces. Use IterativeZnodeWalker for arbitrarily deep trees.
    """

    def walk(self,
             path: str,
             znode_processor: NodeProcessorFn,
             children_processor: ChildrenProcessorFn) -> None:
        if not self._enter(path, znode_processor):
            return

        for name in self._select_children(path, children_processor):
            self.walk(join_path(path, name), znode_processor, children_processor)


class IterativeZnodeWalker(Walker):
    """Depth-first pre-order walker using an explicit stack.

    Visits znodes in exactly the same order as ZnodeWalker, without being
    bounded by the interpreter's recursion limit.
    """

    def walk(self,
             path: str,
             znode_processor: NodeProcessorFn,
             children_processor: ChildrenProcessorFn) -> None:
        stack: List[str] = [path]

        while stack:
            current = stack.pop()
            if not self._enter(current, znode_processor):
                continue

            selected = self._select_children(current, children_processor)
            # Reversed so the first selected child is popped first
            for name in reversed(selected):
                stack.append(join_path(current, name))


def create_walker(strategy: str, client: TreeClient) -> Walker:
    """Create a walker instance by strategy name.

    Args:
        strategy: Name of walking strategy (recursive, dfs, iterative, stack)
        client: TreeClient for the walked namespace

    Returns:
        Walker instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategy_lower = strategy.lower()
    if strategy_lower not in WALKER_STRATEGIES:
        raise ValueError(
            f"Unknown walk strategy: {strategy}. "
            f"Choose from: {', '.join(WALKER_STRATEGIES.keys())}"
        )

    return WALKER_STRATEGIES[strategy_lower](client)


WALKER_STRATEGIES = {
    'recursive': ZnodeWalker,
    'dfs': ZnodeWalker,
    'iterative': IterativeZnodeWalker,
    'stack': IterativeZnodeWalker,
}
