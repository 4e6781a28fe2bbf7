"""Size-bounded chunking that never splits a fenced code block or a table.

The input is first cut into *atoms* by one linear scan over its lines:

- ``CODE``: an opening fence (three or more backticks, optionally followed by
  a language tag free of backticks) through the matching closing fence, or
  to end of input
- ``TABLE``: a run of lines whose stripped form starts with ``|`` and
  contains another ``|``
- ``TEXT``: any other maximal run of lines

Atoms are then packed greedily into chunks of at most ``chunk_size``
characters, joined by a blank line.  An atom longer than ``chunk_size`` is
emitted whole as its own chunk: the size budget gives way, the atom does not.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import NamedTuple

from agentmd.items import Chunk

from .normalize import normalize_newlines

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^(`{3,})[^`]*$")


class AtomKind(enum.Enum):
    CODE = "code"
    TABLE = "table"
    TEXT = "text"


class Atom(NamedTuple):
    kind: AtomKind
    text: str


def _fence_length(line: str) -> int:
    match = _FENCE_RE.match(line.strip())
    return len(match.group(1)) if match else 0


def _closes_fence(line: str, opening: int) -> bool:
    stripped = line.strip()
    return len(stripped) >= opening and stripped == "`" * len(stripped)


def _is_table_line(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("|") and "|" in stripped[1:]


def tokenize_atoms(markdown: str) -> list[Atom]:
    """Cut *markdown* into code, table and text atoms, in order."""
    lines = normalize_newlines(markdown).split("\n")
    atoms: list[Atom] = []
    text_run: list[str] = []

    def _flush_text() -> None:
        text = "\n".join(text_run).strip("\n")
        if text.strip():
            atoms.append(Atom(AtomKind.TEXT, text))
        text_run.clear()

    i = 0
    while i < len(lines):
        line = lines[i]
        fence = _fence_length(line)
        if fence:
            _flush_text()
            end = i + 1
            while end < len(lines) and not _closes_fence(lines[end], fence):
                end += 1
            # Unterminated fences run to end of input
            block = lines[i:end + 1]
            atoms.append(Atom(AtomKind.CODE, "\n".join(block)))
            i = end + 1
        elif _is_table_line(line):
            _flush_text()
            end = i
            while end < len(lines) and _is_table_line(lines[end]):
                end += 1
            atoms.append(Atom(AtomKind.TABLE, "\n".join(lines[i:end])))
            i = end
        else:
            text_run.append(line)
            i += 1
    _flush_text()

    return atoms


def chunk_by_size(markdown: str, chunk_size: int) -> list[Chunk]:
    """Split *markdown* into chunks of at most *chunk_size* characters.

    Code blocks and tables are never split.  ``chunk_size <= 0`` disables
    chunking: the whole (newline-normalized, stripped) input comes back as a
    single chunk.

    Returns:
        Chunks with ``index`` in emission order and ``total`` set to the
        number of chunks on every one of them.
    """
    if chunk_size <= 0:
        return [Chunk(content=normalize_newlines(markdown).strip(), index=0, total=1)]

    contents: list[str] = []
    current = ""

    for atom in tokenize_atoms(markdown):
        if len(atom.text) > chunk_size:
            if current:
                contents.append(current.strip())
                current = ""
            logger.debug(
                "%s atom of %d chars exceeds chunk_size=%d; emitting it whole",
                atom.kind.value, len(atom.text), chunk_size,
            )
            contents.append(atom.text)
            continue

        if not current:
            current = atom.text
        elif len(current) + 2 + len(atom.text) <= chunk_size:
            current = f"{current}\n\n{atom.text}"
        else:
            contents.append(current.strip())
            current = atom.text

    if current:
        contents.append(current.strip())

    chunks = [Chunk(content=content, index=i) for i, content in enumerate(contents)]
    for chunk in chunks:
        chunk.total = len(chunks)
    return chunks
