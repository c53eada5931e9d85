"""Metadata aggregation for metascry.

Submodules
----------
model
    ``Metadata`` record and reserved keys
cache
    ``CacheStore``: per-session scratch dicts keyed by identifier
sections
    ``Section``/``Sections``: lazily loaded heading content
parsing
    YAML frontmatter and heading parsing for markdown text
aggregator
    ``MetadataAggregator``: merge and write frontmatter

Example
-------
>>> from metascry.metadata import CacheStore, MetadataAggregator
>>> aggregator = MetadataAggregator(lookup, fm, structure, loader, editor, CacheStore())
>>> meta = aggregator.aggregate(handle)
>>> meta.get_prop("file.path")
"""

from metascry.metadata.aggregator import MetadataAggregator
from metascry.metadata.cache import CacheStore
from metascry.metadata.model import CACHE_KEY, FILE_KEY, RESERVED_KEYS, Metadata
from metascry.metadata.parsing import (
    FrontmatterResult,
    extract_headings,
    extract_section,
    parse_frontmatter,
    render_frontmatter,
)
from metascry.metadata.sections import Section, Sections, build_sections

__all__ = [
    "MetadataAggregator",
    "CacheStore",
    "Metadata",
    "FILE_KEY",
    "CACHE_KEY",
    "RESERVED_KEYS",
    "FrontmatterResult",
    "parse_frontmatter",
    "render_frontmatter",
    "extract_headings",
    "extract_section",
    "Section",
    "Sections",
    "build_sections",
]
