"""Command implementations for metascry CLI."""

from .read import handle_get, to_json
from .write import add_update_arguments, handle_clear, handle_patch, handle_set

__all__ = [
    "handle_get",
    "handle_patch",
    "handle_set",
    "handle_clear",
    "add_update_arguments",
    "to_json",
]
