"""Split markdown into heading-delimited sections."""

from __future__ import annotations

import re

from agentmd.items import Section

# ATX headings at a true line start.  Fenced code is not special-cased: a
# "# comment" line inside a fence still opens a section.
_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+)$", re.MULTILINE)


def split_sections(markdown: str) -> list[Section]:
    """Partition *markdown* into :class:`Section` objects in source order.

    Content before the first heading gets ``heading=""``.  Section content
    never includes its heading line and has surrounding newlines stripped.
    Input without any heading (including ``""``) yields exactly one section.
    """
    sections: list[Section] = []
    last_end = 0
    pending_heading = ""
    found = False

    for match in _HEADING_RE.finditer(markdown):
        content = markdown[last_end:match.start()].strip("\n")
        if pending_heading or content:
            sections.append(Section(heading=pending_heading, content=content))
        pending_heading = match.group(2).strip()
        last_end = match.end()
        found = True

    tail = markdown[last_end:].strip("\n")
    if pending_heading or tail or not found:
        sections.append(Section(heading=pending_heading, content=tail))

    return sections
