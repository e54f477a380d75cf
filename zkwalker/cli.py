"""Command-line interface for zkwalker.

Usage:
    zkwalker [-auth user:pass] [-root /path] [-print] host1:port1,...,hostN:portN

Prints every visited znode path on its own line; with ``-print`` the content
of each znode follows on a tab-indented line. Exits with status 2 on usage
errors and 1 when connecting or walking fails.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .adapters.kazoo_client import DEFAULT_TIMEOUT
from .api import walk_tree
from .config import WalkerConfig
from .core.errors import WalkerError
from .core.walker import WALKER_STRATEGIES

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zkwalker",
        description="Walk a ZooKeeper znode tree depth first and print what it finds.",
    )
    parser.add_argument(
        "connection_string",
        metavar="connection-string",
        help="comma separated list of zookeeper servers to connect to: host1:port1,...,hostN:portN",
    )
    parser.add_argument(
        "-auth", "--auth",
        default="",
        metavar="user:pass",
        help="<username:password> to use as a digest ACL",
    )
    parser.add_argument(
        "-root", "--root",
        default="/",
        help="znode from which to start the walk (default: %(default)s)",
    )
    parser.add_argument(
        "-print", "--print",
        dest="print_content",
        action="store_true",
        help="print the znode content as string",
    )
    parser.add_argument(
        "-timeout", "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="session timeout in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "-strategy", "--strategy",
        choices=sorted(WALKER_STRATEGIES),
        default="recursive",
        help="walk implementation (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr so stdout carries only walk output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not verbose:
        # Kazoo reports every connection state change at INFO
        logging.getLogger("kazoo").setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)  # exits with EXIT_USAGE on bad usage
    setup_logging(args.verbose)

    config = WalkerConfig.from_connection_string(
        args.connection_string,
        auth=args.auth or None,
        root=args.root,
        print_content=args.print_content,
        timeout=args.timeout,
        strategy=args.strategy,
    )

    try:
        config.validate()
    except WalkerError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        walk_tree(config)
    except Exception as e:
        logger.error("Error: %s", e)
        logger.debug("Walk failed", exc_info=True)
        return EXIT_FAILURE

    return 0


if __name__ == "__main__":
    sys.exit(main())
