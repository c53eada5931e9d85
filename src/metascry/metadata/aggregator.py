"""Per-document metadata aggregation and frontmatter mutation.

The aggregator merges three views of one document into a single
``Metadata`` record:

- the frontmatter mapping (user keys),
- ``file``: structural data plus a lazily loadable section map,
- ``cache``: the session's scratch dict for the document.

``file`` and ``cache`` always win over frontmatter keys of the same name.
Writes go through the mutation editor, after which the written document
is aggregated again so callers get the fresh view.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Any, Optional, Union

from loguru import logger

from metascry.core.config import ScryConfig
from metascry.core.exceptions import DocumentNotFoundError
from metascry.core.types import Factory, UpdateOptions
from metascry.metadata.cache import CacheStore
from metascry.metadata.model import CACHE_KEY, FILE_KEY, Metadata
from metascry.metadata.sections import Sections, build_sections
from metascry.paths.deep import deep_set
from metascry.paths.resolver import PathSpec, resolve_path
from metascry.sources.protocols import (
    ContentLoader,
    DocumentHandle,
    DocumentLookup,
    FrontmatterProvider,
    MutationEditor,
    StructuralProvider,
)

ClearSpec = Union[None, str, list, tuple, Mapping[str, Any]]


class MetadataAggregator:
    """Builds merged metadata for documents and applies frontmatter writes.

    Example:
        aggregator = MetadataAggregator(
            lookup=vault, frontmatter=vault, structure=vault,
            loader=vault, editor=vault, cache=CacheStore(),
        )
        meta = aggregator.aggregate(handle)
        meta["file"]["sections"]["Intro"]       # Section, not loaded yet
        await aggregator.patch(handle, 3, "stats.rating")
    """

    def __init__(
        self,
        lookup: DocumentLookup,
        frontmatter: FrontmatterProvider,
        structure: StructuralProvider,
        loader: ContentLoader,
        editor: MutationEditor,
        cache: CacheStore,
        config: Optional[ScryConfig] = None,
    ):
        """Initialize MetadataAggregator.

        Args:
            lookup: Resolves derived write targets (values/prototype files).
            frontmatter: Frontmatter provider.
            structure: Structural (file/heading) provider.
            loader: Section content loader.
            editor: Mutation editor performing the actual rewrites.
            cache: The session's cache store.
            config: Library configuration.
        """
        self._lookup = lookup
        self._frontmatter = frontmatter
        self._structure = structure
        self._loader = loader
        self._editor = editor
        self._cache = cache
        self._config = config or ScryConfig()

    @property
    def cache_store(self) -> CacheStore:
        return self._cache

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def frontmatter(self, handle: DocumentHandle) -> dict[str, Any]:
        """Get a private copy of a document's frontmatter ({} if none)."""
        data = self._frontmatter.get(handle)
        return copy.deepcopy(dict(data)) if data else {}

    def sections(self, handle: DocumentHandle) -> Sections:
        """Get a document's heading sections (content not loaded)."""
        structural = self._structure.get(handle)
        return build_sections(handle, structural.raw_sections, self._loader)

    def file_data(self, handle: DocumentHandle) -> dict[str, Any]:
        """Get the structural ``file`` record for a document."""
        structural = self._structure.get(handle)
        path = PurePosixPath(structural.identifier)
        folder = str(path.parent)

        data: dict[str, Any] = {
            "path": structural.identifier,
            "name": path.name,
            "stem": path.stem,
            "folder": "" if folder == "." else folder,
            "extension": path.suffix.lstrip("."),
        }
        data.update(structural.timestamps)
        data["sections"] = build_sections(handle, structural.raw_sections, self._loader)
        return data

    def cache(self, handle: DocumentHandle) -> dict[str, Any]:
        """Get the document's cache dict (same instance on every call)."""
        return self._cache.get(handle.path)

    def aggregate(self, handle: DocumentHandle) -> Metadata:
        """Merge frontmatter, file data and cache for one document."""
        metadata = Metadata(self.frontmatter(handle))

        shadowed = [key for key in (FILE_KEY, CACHE_KEY) if key in metadata]
        if shadowed:
            logger.debug(
                f"Frontmatter keys {shadowed} of {handle.path!r} are reserved; "
                "structural/cache data takes precedence"
            )

        metadata[FILE_KEY] = self.file_data(handle)
        metadata[CACHE_KEY] = self.cache(handle)
        logger.debug(f"Aggregated metadata: {handle.path!r} ({len(metadata) - 2} keys)")
        return metadata

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def write_target(
        self, handle: DocumentHandle, options: Optional[UpdateOptions] = None
    ) -> DocumentHandle:
        """Resolve where a write for ``handle`` should land.

        ``prototype`` redirects to ``<folder>/<prototype_file_name><ext>``;
        ``to_values_file`` then redirects to ``<folder>/<stem><suffix><ext>``.

        Raises:
            DocumentNotFoundError: If a derived target does not exist.
        """
        if options is None or not (options.prototype or options.to_values_file):
            return handle

        path = PurePosixPath(handle.path)
        if options.prototype:
            path = path.with_name(f"{self._config.prototype_file_name}{path.suffix}")
        if options.to_values_file:
            path = path.with_name(f"{path.stem}{self._config.values_file_suffix}{path.suffix}")

        identifier = str(path)
        target = self._lookup.by_identifier(identifier)
        if target is None:
            raise DocumentNotFoundError(identifier)

        logger.debug(f"Redirected write: {handle.path!r} -> {target.path!r}")
        return target

    async def patch(
        self,
        handle: DocumentHandle,
        data: Any,
        property_name: PathSpec = None,
        options: Optional[UpdateOptions] = None,
    ) -> Metadata:
        """Merge data into a document's frontmatter.

        Args:
            handle: Document to update.
            data: With ``property_name``, the value to deep-set there (a
                ``Factory`` receives the current value). Without it, a
                mapping whose keys are shallow-merged into the frontmatter
                (a ``Factory`` receives a copy of the frontmatter).
            property_name: Optional deep path within the frontmatter.
            options: Write redirection options.

        Returns:
            Fresh metadata of the written document.
        """
        target = self.write_target(handle, options)
        current = self.frontmatter(target)
        steps = resolve_path(property_name, self._config.path_delimiter)

        if steps:
            deep_set(current, steps, data)
            updates = {steps[0]: current[steps[0]]}
        else:
            if isinstance(data, Factory):
                data = data(copy.deepcopy(current))
            if not isinstance(data, Mapping):
                raise TypeError(
                    f"patch without a property name needs a mapping, got {type(data).__name__}"
                )
            updates = dict(data)

        logger.debug(f"Patching {target.path!r}: keys={list(updates)}")
        await self._editor.patch(target, updates)
        return self.aggregate(target)

    async def set(
        self,
        handle: DocumentHandle,
        data: Any,
        options: Optional[UpdateOptions] = None,
    ) -> Metadata:
        """Replace a document's whole frontmatter.

        Args:
            handle: Document to update.
            data: New frontmatter mapping, or a ``Factory`` receiving a copy
                of the current frontmatter and returning the new one.
            options: Write redirection options.

        Returns:
            Fresh metadata of the written document.
        """
        target = self.write_target(handle, options)

        if isinstance(data, Factory):
            data = data(self.frontmatter(target))
        if not isinstance(data, Mapping):
            raise TypeError(f"frontmatter must be a mapping, got {type(data).__name__}")

        logger.debug(f"Replacing frontmatter of {target.path!r}: keys={list(data)}")
        await self._editor.set(target, dict(data))
        return self.aggregate(target)

    async def clear(
        self,
        handle: DocumentHandle,
        properties: ClearSpec = None,
        options: Optional[UpdateOptions] = None,
    ) -> Metadata:
        """Remove frontmatter keys.

        Args:
            handle: Document to update.
            properties: A key, a list of keys, or a mapping whose keys (not
                values) name what to remove. None removes every key.
            options: Write redirection options.

        Returns:
            Fresh metadata of the written document.
        """
        target = self.write_target(handle, options)
        current = self.frontmatter(target)

        if properties is None:
            requested = list(current)
        elif isinstance(properties, str):
            requested = [properties]
        elif isinstance(properties, Mapping):
            requested = list(properties.keys())
        else:
            requested = list(properties)

        keys = [key for key in requested if key in current]
        if keys:
            logger.debug(f"Clearing {target.path!r}: keys={keys}")
            await self._editor.clear(target, keys)
        else:
            logger.debug(f"Nothing to clear in {target.path!r}")

        return self.aggregate(target)
