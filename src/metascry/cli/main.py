"""CLI entry point for metascry."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from ..core.config import ScryConfig
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="metascry",
        description="Read and write merged metadata of markdown documents",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Vault directory (default: $METASCRY_VAULT or the current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=False)

    get_parser = subparsers.add_parser("get", help="Print merged metadata as JSON")
    get_parser.add_argument("notes", nargs="+", help="Document identifiers")
    get_parser.add_argument("-p", "--path", default=None, help="Deep property path")

    patch_parser = subparsers.add_parser("patch", help="Set one frontmatter property")
    patch_parser.add_argument("note", help="Document identifier")
    patch_parser.add_argument("key", help="Property path (dot separated)")
    patch_parser.add_argument("value", help="Value, parsed as YAML")
    commands.add_update_arguments(patch_parser)

    set_parser = subparsers.add_parser("set", help="Replace the whole frontmatter")
    set_parser.add_argument("note", help="Document identifier")
    set_parser.add_argument("yaml", help="New frontmatter as a YAML mapping")
    commands.add_update_arguments(set_parser)

    clear_parser = subparsers.add_parser("clear", help="Remove frontmatter properties")
    clear_parser.add_argument("note", help="Document identifier")
    clear_parser.add_argument("keys", nargs="*", help="Keys to remove (default: all)")
    commands.add_update_arguments(clear_parser)

    return parser


def configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    config = ScryConfig.from_env()
    if args.vault is not None:
        config.vault_path = args.vault

    try:
        if args.command == "get":
            commands.handle_get(args, config)
        elif args.command == "patch":
            commands.handle_patch(args, config)
        elif args.command == "set":
            commands.handle_set(args, config)
        elif args.command == "clear":
            commands.handle_clear(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
