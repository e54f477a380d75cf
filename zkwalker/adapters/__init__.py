"""Concrete TreeClient implementations."""

from .kazoo_client import KazooTreeClient, DEFAULT_TIMEOUT, DIGEST_SCHEME

__all__ = [
    'KazooTreeClient',
    'DEFAULT_TIMEOUT',
    'DIGEST_SCHEME',
]
