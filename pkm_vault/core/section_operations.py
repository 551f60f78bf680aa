"""Heading-based section lookup and append operations for daily notes."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Optional

from pkm_vault.constants import SECTION_HEADING_LEVEL
from pkm_vault.data_models import DailyNote, Section
from pkm_vault.errors import SectionNotFound

# A heading at the section level or above ("# Title", "## Title") ends a section.
BOUNDARY_PATTERN = re.compile(rf"^#{{1,{SECTION_HEADING_LEVEL}}}(?:[ \t]|$)")


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _is_boundary(line: str) -> bool:
    return BOUNDARY_PATTERN.match(line) is not None


def _locate_section(lines: list[str], section: Section) -> Optional[tuple[int, int]]:
    """Find the heading line of ``section`` and the line where the section ends.

    Args:
        lines: Body split on ``\\n``.
        section: Section to look up. The first exact marker line wins.

    Returns:
        ``(heading_index, end_index)`` where ``end_index`` is the index of the
        next same-or-higher level heading, or ``len(lines)`` when the section
        runs to the end of the body. ``None`` if the marker line is absent.
    """
    try:
        heading_index = lines.index(section.marker)
    except ValueError:
        return None

    for index in range(heading_index + 1, len(lines)):
        if _is_boundary(lines[index]):
            return heading_index, index
    return heading_index, len(lines)


def _is_blank(line: str) -> bool:
    return not line.strip()


def _creation_separator(body: str) -> str:
    """Newlines needed so a new heading follows exactly one blank line."""
    if not body or body.endswith("\n\n"):
        return ""
    if body.endswith("\n"):
        return "\n"
    return "\n\n"


# ==============================================================================
# SECTION OPERATIONS
# ==============================================================================


def has_section(note: DailyNote, section: Section) -> bool:
    """Return True if the body has a line exactly equal to the section's heading."""
    return section.marker in note.body.split("\n")


def section_content(note: DailyNote, section: Section) -> str:
    """Extract the text under a section heading.

    Args:
        note: Note to read from.
        section: Section to extract.

    Returns:
        The lines strictly between the heading and the next heading of the same
        or higher level (or the end of the body), with leading and trailing
        blank lines removed.

    Raises:
        SectionNotFound: If the heading line is not present.
    """
    lines = note.body.split("\n")
    bounds = _locate_section(lines, section)
    if bounds is None:
        raise SectionNotFound(section.label, note.path)

    heading_index, end_index = bounds
    content_lines = lines[heading_index + 1 : end_index]
    while content_lines and _is_blank(content_lines[0]):
        content_lines.pop(0)
    while content_lines and _is_blank(content_lines[-1]):
        content_lines.pop()
    return "\n".join(content_lines)


def append_to_section(note: DailyNote, text: str, section: Section) -> DailyNote:
    """Return a copy of ``note`` with ``text`` appended to ``section``.

    When the section exists, the lines of ``text`` are inserted right before
    the heading that closes the section, or at the end of the body when the
    section is last (a trailing newline of the body stays last). When it does
    not exist, the heading and ``text`` are added at the end of the body after
    one blank line. Existing lines are never removed or reordered, and the
    section end is computed before insertion so heading-like lines inside
    ``text`` do not matter.
    """
    lines = note.body.split("\n")
    bounds = _locate_section(lines, section)

    if bounds is None:
        body = f"{note.body}{_creation_separator(note.body)}{section.marker}\n{text}"
        return replace(note, body=body)

    _, insert_index = bounds
    if insert_index == len(lines) and len(lines) > 1 and lines[-1] == "":
        insert_index -= 1

    updated = lines[:insert_index] + text.split("\n") + lines[insert_index:]
    return replace(note, body="\n".join(updated))
