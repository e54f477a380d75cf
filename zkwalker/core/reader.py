"""Lazy znode reads."""

from typing import Any, Tuple

from .client import TreeClient


class ZnodeReader:
    """Reads one znode when called.

    The reader is bound to a client and a fixed path. Building it costs
    nothing; the remote read only happens when a processor calls it, and
    happens again on every call. Errors raised by the client propagate to
    the caller.
    """

    __slots__ = ("_client", "_path")

    def __init__(self, client: TreeClient, path: str):
        self._client = client
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def __call__(self) -> Tuple[bytes, Any]:
        return self._client.get(self._path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self._path!r})"
