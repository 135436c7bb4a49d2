"""YAML front matter parsing for partial files."""

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import yaml

from ._data import DataMapping

FRONTMATTER_DELIMITER = "---"


class FrontmatterError(ValueError):
    """Raised in strict mode when a front matter block is malformed."""


@dataclass(slots=True, frozen=True)
class FrontmatterDocument:
    """A file split into front matter and body.

    Attributes:
        content: The original file content, front matter included.
        data: Parsed front matter, empty if the file has none.
        body: Content with the front matter block removed.
    """

    content: str
    data: DataMapping
    body: str


def parse_frontmatter(
    content: str,
    *,
    strict: bool = False,
) -> tuple[DataMapping | None, str]:
    """Parse YAML front matter from content.

    The block starts with a line holding only ``---`` at the very beginning of
    the content and ends at the next line starting with ``---``. The rest of
    the closing line is discarded.

    Args:
        content: The full content including front matter.
        strict: Raise FrontmatterError on malformed YAML or a non-mapping
            block instead of treating the content as having no front matter.

    Returns:
        A tuple of (front matter dict or None, body content).
        Returns None for front matter if no valid block is found. An empty
        block yields an empty dict.

    Raises:
        FrontmatterError: In strict mode, if the block cannot be parsed.
    """
    # The opening line must be the delimiter alone; "----" is a rule, not a block
    if content.split("\n", 1)[0].rstrip() != FRONTMATTER_DELIMITER:
        return None, content

    # Find the closing delimiter line
    end_marker = content.find("\n" + FRONTMATTER_DELIMITER, len(FRONTMATTER_DELIMITER))
    if end_marker == -1:
        return None, content

    frontmatter_str = content[len(FRONTMATTER_DELIMITER) : end_marker]
    line_end = content.find("\n", end_marker + 1)
    body = "" if line_end == -1 else content[line_end + 1 :]

    try:
        frontmatter_data = yaml.safe_load(frontmatter_str)  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        if strict:
            raise FrontmatterError(str(e)) from e
        return None, content

    if frontmatter_data is None:
        return {}, body

    if not isinstance(frontmatter_data, dict):
        if strict:
            msg = "Front matter must be a mapping"
            raise FrontmatterError(msg)
        return None, content

    # yaml.safe_load produces string keys at top level for front matter
    return cast("DataMapping", frontmatter_data), body


def load_frontmatter_file(path: Path, *, strict: bool = False) -> FrontmatterDocument:
    """Read a file and split it into front matter and body.

    Args:
        path: Path to the file.
        strict: Passed to parse_frontmatter.

    Returns:
        The parsed document.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterError: In strict mode, if the front matter is malformed.
    """
    content = path.read_text(encoding="utf-8")
    data, body = parse_frontmatter(content, strict=strict)
    return FrontmatterDocument(content=content, data=data or {}, body=body)
