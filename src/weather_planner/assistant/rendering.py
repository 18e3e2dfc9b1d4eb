"""Convert assistant reply text into structured blocks of inline spans."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

BlockKind = Literal["paragraph", "list_item"]

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_LIST_ITEM_RE = re.compile(r"^\s*(?:(\d+)\.|[-*])\s+(.*)$")


@dataclass(frozen=True, slots=True)
class InlineSpan:
    """A run of text with a single style."""

    text: str
    bold: bool = False


@dataclass(frozen=True, slots=True)
class MessageBlock:
    """One rendered line: a paragraph or a list item with its marker."""

    kind: BlockKind
    spans: tuple[InlineSpan, ...]
    marker: str | None = None

    @property
    def plain_text(self) -> str:
        return "".join(span.text for span in self.spans)


def parse_inline(text: str) -> tuple[InlineSpan, ...]:
    """Split ``**bold**`` markers out of ``text``; unmatched markers stay literal."""
    spans: list[InlineSpan] = []
    for index, part in enumerate(_BOLD_RE.split(text)):
        if not part:
            continue
        spans.append(InlineSpan(text=part, bold=index % 2 == 1))
    return tuple(spans)


def parse_message(text: str) -> list[MessageBlock]:
    """Parse reply text line by line, dropping blank lines."""
    blocks: list[MessageBlock] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _LIST_ITEM_RE.match(line)
        if match:
            number, body = match.groups()
            blocks.append(
                MessageBlock(
                    kind="list_item",
                    spans=parse_inline(body.strip()),
                    marker=f"{number}." if number else "•",
                )
            )
            continue
        blocks.append(MessageBlock(kind="paragraph", spans=parse_inline(line.strip())))
    return blocks
