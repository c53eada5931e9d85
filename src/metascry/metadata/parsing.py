"""Parsing utilities for markdown documents.

Provides functions to read and rewrite YAML frontmatter and to locate
ATX headings and the text beneath them.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import yaml

from metascry.core.types import RawSection


@dataclass
class FrontmatterResult:
    """Result from parsing YAML frontmatter.

    Attributes:
        data: Parsed YAML data as dictionary (empty if no frontmatter).
        content: Document content after frontmatter is removed.
        has_frontmatter: Whether frontmatter was found.
        body_offset: Number of lines taken by the frontmatter block.
    """

    data: dict[str, Any]
    content: str
    has_frontmatter: bool
    body_offset: int = 0


# Regex to match YAML frontmatter block at start of document
# Matches: ---\n<yaml content>\n---\n (the yaml content may be empty)
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)

# ATX headings: "# Title", "## Sub ##"
_HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")

_FENCE_PATTERN = re.compile(r"^(```|~~~)")


def parse_frontmatter(content: str, strict: bool = False) -> FrontmatterResult:
    """Parse YAML frontmatter from markdown content.

    Extracts the YAML block between --- delimiters at the start
    of the document, if present.

    Args:
        content: Full markdown document content.
        strict: Raise on an invalid YAML block instead of treating the
            document as having no frontmatter.

    Returns:
        FrontmatterResult with parsed data and remaining content.

    Raises:
        yaml.YAMLError: If ``strict`` and the block is not valid YAML.

    Example:
        >>> result = parse_frontmatter('''---
        ... title: My Doc
        ... tags: [python, code]
        ... ---
        ... # Hello World
        ... ''')
        >>> result.data
        {'title': 'My Doc', 'tags': ['python', 'code']}
        >>> result.has_frontmatter
        True
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if not match:
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    yaml_text = match.group(1)
    remaining_content = content[match.end() :]

    try:
        data = yaml.safe_load(yaml_text)
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            # YAML could parse to a scalar or list - wrap it
            data = {"_raw": data}
    except yaml.YAMLError:
        if strict:
            raise
        # Invalid YAML - treat as no frontmatter
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    return FrontmatterResult(
        data=data,
        content=remaining_content,
        has_frontmatter=True,
        body_offset=match.group(0).count("\n"),
    )


def render_frontmatter(data: Mapping[str, Any], body: str) -> str:
    """Render a document from frontmatter data and a body.

    An empty mapping produces the body alone (no empty block).
    """
    if not data:
        return body

    yaml_text = yaml.safe_dump(
        _plain(data),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"---\n{yaml_text}---\n{body}"


def _plain(value: Any) -> Any:
    """Convert mapping/sequence subclasses to builtins yaml.safe_dump accepts."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def extract_headings(content: str) -> list[RawSection]:
    """Find ATX headings and the line ranges they govern.

    A heading's range runs from its own line up to (not including) the
    next heading of the same or a higher level, or the end of the text.
    Headings inside fenced code blocks are ignored.

    Args:
        content: Markdown text (with or without frontmatter).

    Returns:
        Headings in document order, with 0-based line numbers.
    """
    lines = content.splitlines()
    found: list[tuple[str, int, int]] = []
    in_fence = False

    for number, line in enumerate(lines):
        if _FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = _HEADING_PATTERN.match(line)
        if match:
            found.append((match.group(2).strip(), len(match.group(1)), number))

    sections = []
    for position, (heading, level, start) in enumerate(found):
        end = len(lines)
        for _, next_level, next_start in found[position + 1 :]:
            if next_level <= level:
                end = next_start
                break
        sections.append(RawSection(heading=heading, level=level, start_line=start, end_line=end))
    return sections


def extract_section(content: str, heading: str) -> str:
    """Return the text under every heading named ``heading``.

    The heading lines themselves are excluded. Repeated headings are
    joined with a blank line. Unknown headings give "".
    """
    lines = content.splitlines()
    parts = [
        "\n".join(lines[raw.start_line + 1 : raw.end_line]).strip("\n")
        for raw in extract_headings(content)
        if raw.heading == heading
    ]
    return "\n\n".join(parts)
