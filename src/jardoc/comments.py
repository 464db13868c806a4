"""Doc comment lookup and tag parsing.

A doc block is a ``/** ... */`` comment placed directly above a declaration.
Class-level blocks carry structured tags::

    /**
     * @group Layout
     * @component Foobar
     * @description
     * It's possible to use <strong>html</strong> in
     * the description
     */

Member-level blocks are free text and are returned verbatim (trimmed).
"""

import re

from jardoc.models import CommentTags
from jardoc.syntax import node_text

RECOGNIZED_TAGS = ("group", "component", "description")

_TAG_LINE = re.compile(r"^@(\w+)(?:\s+(.*))?$")
_LINE_DECORATION = re.compile(r"^\s*(?:\*\s?)?")


def is_doc_comment(text: str) -> bool:
    """Check whether a comment is a ``/**`` doc block (and not ``/**/``)."""
    stripped = text.strip()
    return stripped.startswith("/**") and not stripped.startswith("/**/")


def find_doc_comment(node) -> str | None:
    """Return the nearest doc block directly preceding a node.

    Only comments may sit between the block and the node; any other sibling
    (executable code, another declaration) ends the search.

    Args:
        node: Tree-sitter node of a declaration

    Returns:
        Raw comment text, or None if no doc block precedes the node.
    """
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = node_text(sibling)
        if is_doc_comment(text):
            return text
        sibling = sibling.prev_sibling
    return None


def strip_comment_decoration(text: str) -> list[str]:
    """Remove comment delimiters and leading ``*`` decoration from each line.

    Inline markup and trailing whitespace of each line are left untouched.
    """
    body = text.strip()
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]

    return [_LINE_DECORATION.sub("", line, count=1) for line in body.splitlines()]


def _trim_blank_lines(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def parse_tag_block(text: str | None) -> CommentTags:
    """Parse a class-level doc block into its recognized tags.

    ``@group`` and ``@component`` take the trimmed rest of their line.
    ``@description`` collects the rest of its line plus every following line
    until the next recognized tag or the end of the block. Unrecognized tags
    are ignored, except inside a description where they are plain text.

    Args:
        text: Raw comment text, or None

    Returns:
        CommentTags, with empty strings for absent tags.
    """
    if not text:
        return CommentTags()

    values: dict[str, str] = {}
    description_lines: list[str] | None = None
    collecting_description = False

    for line in strip_comment_decoration(text):
        match = _TAG_LINE.match(line.strip())
        if match and match.group(1) in RECOGNIZED_TAGS:
            tag, rest = match.group(1), match.group(2) or ""
            if tag == "description":
                description_lines = [rest] if rest.strip() else []
                collecting_description = True
            else:
                values[tag] = rest.strip()
                collecting_description = False
        elif collecting_description and description_lines is not None:
            description_lines.append(line)

    description = ""
    if description_lines:
        description = "\n".join(_trim_blank_lines(description_lines))

    return CommentTags(
        group=values.get("group", ""),
        component=values.get("component", ""),
        description=description,
    )


def parse_member_description(text: str | None) -> str:
    """Return the free text of a member doc block, trimmed. Tags are not parsed."""
    if not text:
        return ""
    return "\n".join(_trim_blank_lines(strip_comment_decoration(text))).strip()
