"""Test fixtures for zkwalker consumers.

MemoryTreeClient is an in-memory TreeClient that records every remote call,
so walks can be checked for order, laziness and pruning without a running
ZooKeeper ensemble.
"""

from typing import Dict, List, Optional, Tuple, Union

from kazoo.exceptions import NoNodeError
from kazoo.protocol.states import ZnodeStat

from ..core.client import TreeClient


def make_stat(data_length: int = 0, num_children: int = 0) -> ZnodeStat:
    """Build a ZnodeStat with zeroed zxids and timestamps."""
    return ZnodeStat(
        czxid=0, mzxid=0, ctime=0, mtime=0,
        version=0, cversion=0, aversion=0,
        ephemeralOwner=0,
        dataLength=data_length,
        numChildren=num_children,
        pzxid=0,
    )


class MemoryTreeClient(TreeClient):
    """In-memory znode tree.

    Example:
        client = (MemoryTreeClient()
                  .node("/", "", "foo")
                  .node("/foo", "hello"))
        ZnodeWalker(client).walk("/", print_znode_path, all_children)
        assert client.visited_ls == ["/", "/foo"]
        assert client.visited_get == []
    """

    def __init__(self):
        self.znodes: Dict[str, bytes] = {}
        self.children: Dict[str, List[str]] = {}
        self.get_errors: Dict[str, Exception] = {}
        self.ls_errors: Dict[str, Exception] = {}
        self.visited_get: List[str] = []
        self.visited_ls: List[str] = []
        self.auth: List[Tuple[str, Union[bytes, str]]] = []
        self.closed = False

    def node(self, path: str, content: Union[bytes, str] = b"", *children: str) -> "MemoryTreeClient":
        """Add a znode with its content and child names; returns self for chaining."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.znodes[path] = content
        self.children[path] = list(children)
        return self

    def fail_get(self, path: str, error: Optional[Exception] = None) -> "MemoryTreeClient":
        """Make reads of path raise error."""
        self.get_errors[path] = error or NoNodeError(path)
        return self

    def fail_ls(self, path: str, error: Optional[Exception] = None) -> "MemoryTreeClient":
        """Make listings of path raise error."""
        self.ls_errors[path] = error or NoNodeError(path)
        return self

    def get(self, path: str):
        self.visited_get.append(path)
        if path in self.get_errors:
            raise self.get_errors[path]
        if path not in self.znodes:
            raise NoNodeError(f"mem: non-existing znode {path}")
        content = self.znodes[path]
        return content, make_stat(len(content), len(self.children[path]))

    def get_children(self, path: str):
        self.visited_ls.append(path)
        if path in self.ls_errors:
            raise self.ls_errors[path]
        if path not in self.children:
            raise NoNodeError(f"mem: non-existing znode {path}")
        children = self.children[path]
        return list(children), make_stat(len(self.znodes[path]), len(children))

    def add_auth(self, scheme: str, credential: Union[bytes, str]) -> None:
        self.auth.append((scheme, credential))

    def close(self) -> None:
        self.closed = True
