import argparse
import logging
import sys

from . import app_name
from .backend import KeyringBackend, SecretServiceBackend
from .invoker import UnlockInvoker

LOG_FORMAT = "%(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


def set_args() -> argparse.ArgumentParser:
    """
    Set the arguments for unlock-keyring.

    Returns:
        argparse.ArgumentParser: The argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=app_name,
        description="Unlock the default keyring through the Secret Service and report the result.",
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log diagnostics to stderr. Repeat for debug output.",
    )
    return parser


def setup_logging(verbosity: int = 0) -> None:
    """
    Sends log records to stderr so stdout only ever carries the result line.

    Args:
        verbosity (int): 0 for warnings, 1 for info, 2 or more for debug.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger(__package__)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)


def main(argv: list[str] | None = None, backend: KeyringBackend | None = None) -> int:
    """
    Main function for unlock-keyring.

    Args:
        argv (list[str] | None): Command line arguments, `sys.argv[1:]` when None.
        backend (KeyringBackend | None): Backend to unlock with, the Secret Service when None.

    Returns:
        int: The process exit status, 0 or 1 whatever arguments were given.
    """
    parser = set_args()
    try:
        args, ignored = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        args, ignored = parser.parse_known_args([])[0], [str(e)]
    setup_logging(args.verbose)
    if ignored:
        logger.info("Ignoring arguments: %s", " ".join(ignored))
    return UnlockInvoker(backend or SecretServiceBackend()).run()


if __name__ == "__main__":
    sys.exit(main())
