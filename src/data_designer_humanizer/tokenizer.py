"""Block and sentence segmentation for HTML-ish prose.

Both splitters are lossless: joining what they return reproduces the input
exactly, so a pass that leaves a piece alone leaves the document alone.

Blocks are separated by blank lines, or by the gap between a closing block
tag (``</p>``, ``</h2>``, ``</li>``, ...) and the next opening tag. A sentence
ends at a run of ``.``, ``!`` or ``?`` (plus closing quotes or brackets) that
is followed by whitespace, a tag, or the end of the block.

Known limitations:
    - Only the abbreviations in ``_ABBREVIATIONS`` are recognised; initials
      ("John F. Kennedy") and anything else outside that list still end a
      sentence. "No." counts as an abbreviation only when a number follows
      it, so "she said no. 5 more came" is not split.
    - Nested block markup (``<div><p>..</p><p>..</p></div>``) is split at
      the inner paragraph boundaries, so the outer tags end up in the
      first and last pieces.
    - Tags are not parsed; a ``>`` or ``.`` inside an attribute value can
      confuse both splitters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

_CLOSING_BLOCK_TAGS = ("p", "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li", "blockquote", "table", "nav", "div")
_BLOCK_BOUNDARY_RE = re.compile(
    r"(\n[ \t]*\n\s*|(?:"
    + "|".join(rf"(?<=</{tag}>)" for tag in _CLOSING_BLOCK_TAGS)
    + r")\s*(?=<[a-z]))",
    re.IGNORECASE,
)
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_NON_PROSE_PREFIXES = ("<h", "<ul", "<ol", "<li", "<div", "<nav", "<table")

_TERMINATOR_RE = re.compile(r"[.!?]+[\"'”’)\]]*(?=\s|<|$)")
_LAST_TOKEN_RE = re.compile(r"(\S+)$")
_ABBREVIATIONS = frozenset({
    "e.g", "i.e", "etc", "vs", "cf", "mr", "mrs", "ms", "dr", "prof",
    "jr", "sr", "inc", "ltd", "fig", "approx", "dept",
})
_NUMBERED = "no"
_DIGIT_AHEAD_RE = re.compile(r"\s*\d")
_TAG_RE = re.compile(r"<[^>]*>")


def split_blocks(text: str) -> list[str]:
    return _BLOCK_BOUNDARY_RE.split(text)[0::2]


def segment_blocks(text: str) -> tuple[list[str], list[str]]:
    """Return ``(blocks, separators)`` with ``len(separators) == len(blocks) - 1``."""
    pieces = _BLOCK_BOUNDARY_RE.split(text)
    return pieces[0::2], pieces[1::2]


def join_blocks(blocks: list[str], separators: list[str]) -> str:
    out = [blocks[0]]
    for sep, block in zip(separators, blocks[1:]):
        out.append(sep)
        out.append(block)
    return "".join(out)


def map_blocks(text: str, fn: Callable[[int, str], str]) -> str:
    """Rewrite each block with ``fn(index, block)``, keeping the separators."""
    blocks, separators = segment_blocks(text)
    return join_blocks([fn(i, block) for i, block in enumerate(blocks)], separators)


def is_blank_line_separator(separator: str) -> bool:
    return bool(_BLANK_LINE_RE.search(separator))


def is_prose_block(block: str) -> bool:
    return not block.lstrip().lower().startswith(_NON_PROSE_PREFIXES)


@dataclass
class Sentences:
    """Sentences of one block.

    Each part keeps its leading whitespace and its terminator; ``tail`` is
    whatever follows the last terminator (often a closing tag, sometimes an
    unterminated fragment).
    """

    parts: list[str]
    tail: str = ""

    def __len__(self) -> int:
        return len(self.parts)

    def join(self) -> str:
        return "".join(self.parts) + self.tail


def _is_abbreviation(before: str, after: str) -> bool:
    m = _LAST_TOKEN_RE.search(before)
    if not m:
        return False
    token = _TAG_RE.sub("", m.group(1)).lstrip("(\"'").lower()
    if token == _NUMBERED:
        # "No. 5" is numbered, "said no." ends a sentence
        return bool(_DIGIT_AHEAD_RE.match(after))
    return token in _ABBREVIATIONS


def split_sentences(block: str) -> Sentences:
    parts: list[str] = []
    start = 0
    for m in _TERMINATOR_RE.finditer(block):
        if m.group(0) == "." and _is_abbreviation(block[start : m.start()], block[m.end() :]):
            continue
        parts.append(block[start : m.end()])
        start = m.end()
    return Sentences(parts=parts, tail=block[start:])


def strip_tags(text: str) -> str:
    return _TAG_RE.sub(" ", text)


def count_words(text: str) -> int:
    """Whitespace-delimited word count after removing markup."""
    return len(strip_tags(text).split())
