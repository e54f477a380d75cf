"""TreeClient abstraction for zkwalker.

The TreeClient is the only boundary the walker depends on. It knows how to
read a single znode and how to list its direct children; it knows nothing
about traversal order, pruning or output. How the underlying session was
established (servers, timeouts, credentials) is the concern of the concrete
client, not the walker.
"""

import posixpath
from abc import ABC, abstractmethod
from typing import Any, List, Tuple, Union


class TreeClient(ABC):
    """Abstract client for a remote hierarchical namespace.

    Each method is a blocking remote call and may fail independently of the
    others. Failures are reported by raising; the walker decides which of
    them are visible to processors and which propagate.
    """

    @abstractmethod
    def get(self, path: str) -> Tuple[bytes, Any]:
        """Read the content of a znode.

        Args:
            path: Absolute znode path

        Returns:
            Tuple of (data, stat). Every call is a fresh remote read.
        """
        pass

    @abstractmethod
    def get_children(self, path: str) -> Tuple[List[str], Any]:
        """List the direct children of a znode.

        Args:
            path: Absolute znode path

        Returns:
            Tuple of (names, stat) where names are single path segments,
            in whatever order the server returned them.
        """
        pass

    @abstractmethod
    def add_auth(self, scheme: str, credential: Union[bytes, str]) -> None:
        """Attach a credential to the session.

        Args:
            scheme: ACL scheme, e.g. "digest"
            credential: Scheme payload, e.g. b"user:pass"
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the session. The client is unusable afterwards."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None


def join_path(parent: str, name: str) -> str:
    """Join a znode path and a single child segment.

    Repeated slashes are collapsed, including leading ones.

    >>> join_path("/", "foo")
    '/foo'
    >>> join_path("/foo", "bar")
    '/foo/bar'
    >>> join_path("/", "/foo")
    '/foo'
    """
    joined = posixpath.normpath(parent + "/" + name)
    # normpath keeps exactly two leading slashes
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined
