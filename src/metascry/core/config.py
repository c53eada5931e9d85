"""Configuration management for metascry."""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ScryConfig:
    """Main library configuration.

    Attributes:
        vault_path: Root directory of the filesystem vault backend.
        path_delimiter: Separator used when parsing string property paths.
        values_file_suffix: Stem suffix of a document's companion values file
            (``Note.md`` -> ``Note.values.md``).
        prototype_file_name: Stem of the per-folder shared prototype document.
        default_extension: Extension assumed for identifiers given without one.
        encoding: Text encoding used by the vault backend.
    """

    vault_path: Path = field(default_factory=Path.cwd)
    path_delimiter: str = "."
    values_file_suffix: str = ".values"
    prototype_file_name: str = "_prototype"
    default_extension: str = ".md"
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "ScryConfig":
        """Load configuration from environment variables."""
        config = cls()

        if path := os.environ.get("METASCRY_VAULT"):
            config.vault_path = Path(path)

        if delimiter := os.environ.get("METASCRY_PATH_DELIMITER"):
            config.path_delimiter = delimiter

        if suffix := os.environ.get("METASCRY_VALUES_SUFFIX"):
            config.values_file_suffix = suffix

        if name := os.environ.get("METASCRY_PROTOTYPE_NAME"):
            config.prototype_file_name = name

        return config
