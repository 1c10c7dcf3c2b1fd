"""
SKILL.md header parsing.

A skill document may open with a header block:

    ---
    name: brainstorming
    description: Turn rough ideas into designs
    ---

    # Body starts here

Only the name and description fields are kept. Parsing is tolerant:
lines inside the block that are not `key: value` are ignored, and a
document without a closed header block simply has no metadata.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import re as _re

import pydantic as _pydantic

import skillcore.constants as constants

_logger = _logging.getLogger(__name__)

_FIELD_RE = _re.compile(r"^(\w+):\s*(.*)$")
_BOM = "\ufeff"


class SkillFrontmatter(_pydantic.BaseModel):
    """
    Metadata parsed from a SKILL.md header block.

    Both fields are optional; an absent header leaves both unset.
    """

    model_config = _pydantic.ConfigDict(frozen=True, extra="ignore")

    name: str | None = _pydantic.Field(
        default=None,
        description="Display name of the skill",
    )

    description: str | None = _pydantic.Field(
        default=None,
        description="One-line summary of what the skill does",
    )

    @_pydantic.field_validator("name", "description", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


def _split_header(content: str) -> tuple[list[str], str] | None:
    """
    Split a document into header lines and body.

    Returns None when the document does not open with a closed header
    block. The body is everything after the closing marker line, verbatim.
    """
    lines = content.removeprefix(_BOM).splitlines(keepends=True)
    if not lines or lines[0].strip() != constants.FRONTMATTER_MARKER:
        return None

    for index in range(1, len(lines)):
        if lines[index].strip() == constants.FRONTMATTER_MARKER:
            return lines[1:index], "".join(lines[index + 1 :])

    # Opening marker without a closing one
    return None


def parse_frontmatter(content: str) -> SkillFrontmatter:
    """
    Extract name and description from document text.

    Args:
        content: Raw SKILL.md content.

    Returns:
        Parsed frontmatter; both fields unset if there is no header.
    """
    split = _split_header(content)
    if split is None:
        return SkillFrontmatter()

    header, _body = split
    fields: dict[str, str] = {}
    for line in header:
        match = _FIELD_RE.match(line.rstrip("\r\n"))
        if match is None:
            continue
        key, value = match.groups()
        if key in ("name", "description"):
            fields[key] = value

    return SkillFrontmatter.model_validate(fields)


def extract_frontmatter(skill_file: _pathlib.Path) -> SkillFrontmatter:
    """
    Read a skill document and extract its metadata.

    Never raises: an unreadable file yields empty metadata.

    Args:
        skill_file: Path to a SKILL.md file.

    Returns:
        Parsed frontmatter.
    """
    try:
        content = skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _logger.debug("Could not read skill document %s: %s", skill_file, e)
        return SkillFrontmatter()
    return parse_frontmatter(content)


def strip_frontmatter(content: str) -> str:
    """
    Remove the leading header block from document text.

    Text without a header block is returned unchanged, so applying this
    twice gives the same result as applying it once to a document whose
    body does not itself open with a header block.

    Args:
        content: Raw SKILL.md content.

    Returns:
        The body following the closing marker line.
    """
    split = _split_header(content)
    if split is None:
        return content
    return split[1]
