"""Write commands for the metascry CLI."""

import asyncio

import yaml

from ...app import open_vault
from ...core.config import ScryConfig
from ...core.types import UpdateOptions
from .read import to_json


def add_update_arguments(parser) -> None:
    """Add write-redirection arguments to a parser."""
    parser.add_argument(
        "--values",
        action="store_true",
        help="Write to the note's companion values file",
    )
    parser.add_argument(
        "--prototype",
        action="store_true",
        help="Write to the folder's shared prototype note",
    )


def _options(args) -> UpdateOptions:
    return UpdateOptions(to_values_file=args.values, prototype=args.prototype)


def handle_patch(args, config: ScryConfig) -> None:
    """Handle patch command.

    Args:
        args: Parsed command arguments.
        config: Library configuration.
    """
    asyncio.run(_handle_patch_async(args, config))


async def _handle_patch_async(args, config: ScryConfig) -> None:
    value = yaml.safe_load(args.value)
    async with open_vault(config=config) as session:
        result = await session.scrier.patch(args.note, value, args.key, _options(args))
        print(to_json(result.frontmatter))


def handle_set(args, config: ScryConfig) -> None:
    """Handle set command.

    Args:
        args: Parsed command arguments.
        config: Library configuration.

    Raises:
        ValueError: If the YAML is not a mapping.
    """
    asyncio.run(_handle_set_async(args, config))


async def _handle_set_async(args, config: ScryConfig) -> None:
    data = yaml.safe_load(args.yaml) or {}
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a YAML mapping")
    async with open_vault(config=config) as session:
        result = await session.scrier.set(args.note, data, _options(args))
        print(to_json(result.frontmatter))


def handle_clear(args, config: ScryConfig) -> None:
    """Handle clear command.

    Args:
        args: Parsed command arguments.
        config: Library configuration.
    """
    asyncio.run(_handle_clear_async(args, config))


async def _handle_clear_async(args, config: ScryConfig) -> None:
    keys = list(args.keys) or None
    async with open_vault(config=config) as session:
        result = await session.scrier.clear(args.note, keys, _options(args))
        print(to_json(result.frontmatter))
