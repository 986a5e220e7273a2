"""Document assembly: parse -> merge -> serialize -> concatenate"""

import logging
from typing import Iterable, Optional

from mdassemble.config import Settings
from mdassemble.core.models import DerivedFields, FrontmatterBlock, ParseOutcome
from mdassemble.core.parse import parse_template
from mdassemble.core.serialize import serialize
from mdassemble.core.store import merge


logger = logging.getLogger(__name__)


def format_heading(text: str, level: int = 1) -> str:
    """'# text' followed by a blank line."""
    return f"{'#' * level} {text}\n\n"


def compose(
    template_body: Optional[str],
    heading: Optional[str],
    stdin_content: str,
    serialized_frontmatter: str = "",
    heading_level: int = 1,
    ) -> str:
    """Concatenate frontmatter, template body, heading, and stdin content in that order.

    Empty frontmatter and a None body/heading are omitted; stdin is always last.
    """
    parts = [serialized_frontmatter]
    if template_body is not None:
        parts.append(template_body)
    if heading is not None:
        parts.append(format_heading(heading, heading_level))
    parts.append(stdin_content)
    return "".join(parts)


def assemble_document(
    template_text: Optional[str],
    explicit_pairs: Iterable[str],
    derived: DerivedFields,
    heading: Optional[str],
    stdin_content: str,
    settings: Optional[Settings] = None,
    ) -> str:
    """Run the full pipeline over already-read inputs and return the document text."""
    settings = settings or Settings()

    template_fm: Optional[FrontmatterBlock] = None
    body: Optional[str] = None
    if template_text is not None:
        parsed = parse_template(template_text, settings.delimiter)
        if parsed.outcome is not ParseOutcome.complete:
            logger.warning("Template frontmatter is %s; template content dropped", parsed.outcome.value)
        template_fm, body = parsed.frontmatter, parsed.body

    block = merge(template_fm, explicit_pairs, derived)
    header = "" if block.is_empty() else serialize(block, settings.delimiter, settings.key_order)
    logger.debug("assembled frontmatter with %d entries", len(block))
    return compose(body, heading, stdin_content, header, settings.heading_level)
