"""Node and children processing strategies for zkwalker.

The walker calls two kinds of processors:

- A node processor ``(path, reader) -> skip_children`` runs once per visited
  znode. It may call ``reader()`` to fetch the znode content; nothing is read
  otherwise. Returning a truthy value prunes the subtree.
- A children processor ``(path, children, stat, error) -> names`` receives the
  listing of a znode (or the error raised while listing it) and returns the
  names to descend into, in order.

Raising from either processor aborts the whole walk. Any callable with the
right signature works; the classes below are the built-in strategies.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence, TextIO

from .errors import ChildrenListingError
from .reader import ZnodeReader

logger = logging.getLogger(__name__)


class ZnodeProcessor(ABC):
    """Abstract base class for node processors."""

    @abstractmethod
    def __call__(self, path: str, znode: ZnodeReader) -> bool:
        """Process a single znode.

        Args:
            path: Path of the visited znode
            znode: Lazy reader for the znode content

        Returns:
            True to skip the znode's children
        """
        pass


class ChildrenProcessor(ABC):
    """Abstract base class for children processors."""

    @abstractmethod
    def __call__(self,
                 path: str,
                 children: Optional[Sequence[str]],
                 stat: Any,
                 error: Optional[BaseException]) -> Sequence[str]:
        """Select which children of a znode to walk into.

        Args:
            path: Path of the parent znode
            children: Child names as listed, or None if listing failed
            stat: Stat of the parent returned with the listing
            error: Exception raised while listing, or None

        Returns:
            Names of the children to visit, in visiting order
        """
        pass


class _Printer:
    """Mixin writing lines to a stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)


class PrintZnodePath(_Printer, ZnodeProcessor):
    """Prints only the znode path, never reads its content."""

    def __call__(self, path: str, znode: ZnodeReader) -> bool:
        self._emit(path)
        return False


class PrintZnodePathAndContent(_Printer, ZnodeProcessor):
    """Prints the znode path followed by its content.

    A znode that can't be read is logged and treated as a leaf: the error
    does not stop the walk, but its children are not listed.
    """

    def __init__(self, stream: Optional[TextIO] = None, encoding: str = "utf-8"):
        super().__init__(stream)
        self.encoding = encoding

    def __call__(self, path: str, znode: ZnodeReader) -> bool:
        self._emit(path)
        try:
            data, _ = znode()
        except Exception as e:
            logger.warning("Can't get %s: %s", path, e)
            return True
        if data:
            self._emit("\t" + data.decode(self.encoding, errors="replace"))
        return False


class NodeFunctionProcessor(ZnodeProcessor):
    """Node processor that uses a user-provided function.

    The function may return None, which is read as "don't skip".
    """

    def __init__(self, func: Callable[[str, ZnodeReader], Optional[bool]]):
        self.func = func

    def __call__(self, path: str, znode: ZnodeReader) -> bool:
        return bool(self.func(path, znode))


class AllChildren(ChildrenProcessor):
    """Visits every listed child; a failed listing counts as no children."""

    def __call__(self, path, children, stat, error) -> List[str]:
        if error is not None:
            logger.warning("Can't list children of %s: %s", path, error)
            return []
        return list(children or [])


class NoChildren(ChildrenProcessor):
    """Never descends below the znode it is called for."""

    def __call__(self, path, children, stat, error) -> List[str]:
        return []


class StrictChildren(ChildrenProcessor):
    """Visits every listed child; a failed listing aborts the walk."""

    def __call__(self, path, children, stat, error) -> List[str]:
        if error is not None:
            raise ChildrenListingError(path, error) from error
        return list(children or [])


class FilteredChildren(ChildrenProcessor):
    """Keeps only the children accepted by a predicate.

    The predicate is called as ``predicate(parent_path, name)``. Selection
    and error handling are delegated to ``base`` first, so by default a
    failed listing is logged and treated as no children.
    """

    def __init__(self,
                 predicate: Callable[[str, str], bool],
                 base: Optional[Callable[..., Sequence[str]]] = None):
        self.predicate = predicate
        self.base = base if base is not None else AllChildren()

    def __call__(self, path, children, stat, error) -> List[str]:
        selected = self.base(path, children, stat, error)
        return [name for name in selected if self.predicate(path, name)]


print_znode_path = PrintZnodePath()
print_znode_path_and_content = PrintZnodePathAndContent()
all_children = AllChildren()
no_children = NoChildren()
strict_children = StrictChildren()
