"""Frontmatter merging: ordered override layers folded into one block"""

import logging
from datetime import datetime, timezone
from functools import reduce
from typing import Iterable, Optional

from mdassemble.core.models import (
    DerivedFields,
    FrontmatterBlock,
    Layer,
    Scalar,
    TagList,
    ID_KEY,
    TAGS_KEY,
    TITLE_KEY,
)


logger = logging.getLogger(__name__)


def split_pair_args(values: Optional[Iterable[str]]) -> list[str]:
    """Flatten comma-separated --frontmatter values into individual 'k=v' strings."""
    return [part for value in values or [] for part in value.split(",")]


def parse_override_pairs(pairs: Iterable[str]) -> Layer:
    """Build the explicit-override layer from 'key=value' strings.

    Split on the first '='. Pairs without '=' or with an empty key are dropped.
    """
    entries = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            logger.debug("discarding malformed frontmatter pair %r", pair)
            continue
        entries.append((key, Scalar(value)))
    return Layer(name="overrides", entries=tuple(entries))


def unix_id(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp at second precision, e.g. '2024-05-01T12:30:00Z'."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def derive_fields(
    title: Optional[str] = None,
    literal_id: Optional[str] = None,
    id_unix: bool = False,
    tags: Optional[Iterable[str]] = None,
    now: Optional[datetime] = None,
    ) -> DerivedFields:
    """Resolve the derived fields; a time-derived id beats a literal one."""
    tag_items = tuple(tags) if tags else None
    return DerivedFields(
        title=title,
        id=unix_id(now) if id_unix else literal_id,
        tags=tag_items,
    )


def derived_layer(derived: DerivedFields) -> Layer:
    """Layer holding only the derived fields that were supplied."""
    entries = []
    if derived.title is not None:
        entries.append((TITLE_KEY, Scalar(derived.title)))
    if derived.id is not None:
        entries.append((ID_KEY, Scalar(derived.id)))
    if derived.tags is not None:
        entries.append((TAGS_KEY, TagList(derived.tags)))
    return Layer(name="derived", entries=tuple(entries))


def apply_layer(block: FrontmatterBlock, layer: Layer) -> FrontmatterBlock:
    """Write every entry of layer into block; same keys are replaced whole."""
    for key, value in layer.entries:
        block.set(key, value)
    return block


def merge_layers(layers: Iterable[Layer], base: Optional[FrontmatterBlock] = None) -> FrontmatterBlock:
    """Fold layers left to right; later layers win."""
    return reduce(apply_layer, layers, base if base is not None else FrontmatterBlock())


def template_layer(frontmatter: FrontmatterBlock) -> Layer:
    return Layer(name="template", entries=tuple(frontmatter.items()))


def merge(
    template_frontmatter: Optional[FrontmatterBlock],
    explicit_pairs: Iterable[str],
    derived: DerivedFields,
    ) -> FrontmatterBlock:
    """Merge template values, then explicit pairs, then derived fields."""
    layers = [
        template_layer(template_frontmatter or FrontmatterBlock()),
        parse_override_pairs(explicit_pairs),
        derived_layer(derived),
    ]
    return merge_layers(layers)
