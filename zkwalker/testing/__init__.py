"""Testing utilities for zkwalker."""

from .fixtures import MemoryTreeClient, make_stat

__all__ = ['MemoryTreeClient', 'make_stat']
