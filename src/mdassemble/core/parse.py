"""Template parsing: a line-driven state machine over the frontmatter delimiter"""

import logging
from typing import Iterable, Optional

from mdassemble.core.models import (
    FrontmatterBlock,
    ParsedTemplate,
    ParseOutcome,
    ParseState,
    Scalar,
    TagList,
    TAGS_KEY,
)


DELIMITER = "---"

_OUTCOMES = {
    ParseState.before_block: ParseOutcome.no_frontmatter,
    ParseState.in_block: ParseOutcome.unterminated_frontmatter,
    ParseState.after_block: ParseOutcome.complete,
}

logger = logging.getLogger(__name__)


def _is_delimiter(line: str, delimiter: str) -> bool:
    return line.rstrip("\r\n") == delimiter


def _list_item(line: str) -> Optional[str]:
    """Return the item text of a '- item' line, else None."""
    stripped = line.strip()
    if stripped == "-":
        return ""
    if stripped.startswith("- "):
        return stripped[2:].strip()
    return None


def parse_entries(lines: Iterable[str]) -> FrontmatterBlock:
    """Parse 'key: value' lines into a block.

    Only the first colon splits, so values such as URLs keep their colons.
    Lines without a colon are ignored, except '- item' lines directly under
    an empty 'tags:' header, which build the tag list. An item line holding
    a colon is a 'key: value' entry instead, so scalar keys such as '- x'
    survive a round trip.
    """
    block = FrontmatterBlock()
    tag_items: Optional[list[str]] = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if tag_items is not None:
            item = _list_item(line) if ":" not in line else None
            if item is not None:
                tag_items.append(item)
                block.set(TAGS_KEY, TagList(tuple(tag_items)))
                continue
            tag_items = None

        key, sep, value = line.partition(":")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            continue
        block.set(key, Scalar(value))
        if key == TAGS_KEY and not value:
            tag_items = []
    return block


def parse_template(text: str, delimiter: str = DELIMITER) -> ParsedTemplate:
    """Split template text into (frontmatter, body).

    The first delimiter line opens the block, the second closes it; anything
    before the opening line is discarded and everything after the closing
    line is kept verbatim. If the block never closes, both frontmatter and
    body come back empty and the outcome says why.
    """
    state = ParseState.before_block
    fm_lines: list[str] = []
    body_parts: list[str] = []

    for line in text.splitlines(keepends=True):
        if state is ParseState.after_block:
            body_parts.append(line)
        elif _is_delimiter(line, delimiter):
            state = ParseState.in_block if state is ParseState.before_block else ParseState.after_block
        elif state is ParseState.in_block:
            fm_lines.append(line)

    outcome = _OUTCOMES[state]
    if outcome is not ParseOutcome.complete:
        logger.debug("template parse ended in %s; no frontmatter or body kept", state.value)
        return ParsedTemplate(frontmatter=FrontmatterBlock(), body="", outcome=outcome)

    return ParsedTemplate(
        frontmatter=parse_entries(fm_lines),
        body="".join(body_parts),
        outcome=outcome,
    )
