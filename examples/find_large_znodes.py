#!/usr/bin/env python3
"""
Custom processors example: report znodes whose content exceeds a size.

This example demonstrates:
- A node processor that reads content lazily, only below a prefix
- A children processor that prunes well-known noisy subtrees
- Listing failures treated as fatal instead of logged

Usage:
    python examples/find_large_znodes.py localhost:2181 [min_bytes]
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from zkwalker import FilteredChildren, connect, strict_children, walk

IGNORED = {"zookeeper"}


def main():
    servers = sys.argv[1].split(",") if len(sys.argv) > 1 else ["localhost:2181"]
    min_bytes = int(sys.argv[2]) if len(sys.argv) > 2 else 1024

    found = []

    def report_large(path, znode):
        _, stat = znode()
        if stat.dataLength >= min_bytes:
            found.append((path, stat.dataLength))
        return False

    skip_ignored = FilteredChildren(
        lambda parent, name: not (parent == "/" and name in IGNORED),
        base=strict_children,
    )

    with connect(servers) as client:
        walk(client, "/", report_large, skip_ignored)

    for path, size in sorted(found, key=lambda item: -item[1]):
        print(f"{size:>10}  {path}")
    print(f"{len(found)} znodes >= {min_bytes} bytes")


if __name__ == "__main__":
    main()
