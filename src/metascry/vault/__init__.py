"""Filesystem vault backend for metascry."""

from .filesystem import Vault
from .providers import VaultEditor, VaultFrontmatter, VaultSectionLoader, VaultStructure

__all__ = [
    "Vault",
    "VaultEditor",
    "VaultFrontmatter",
    "VaultSectionLoader",
    "VaultStructure",
]
