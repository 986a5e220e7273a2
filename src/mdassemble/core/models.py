"""Frontmatter data types: value variants, blocks, parse states, and merge layers"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union


TAGS_KEY = "tags"
TITLE_KEY = "title"
ID_KEY = "id"


@dataclass(frozen=True)
class Scalar:
    """A single string value."""
    value: str


@dataclass(frozen=True)
class TagList:
    """An ordered list of strings; only the reserved tags key uses this form."""
    items: tuple[str, ...] = ()


FrontmatterValue = Union[Scalar, TagList]


class ParseState(str, Enum):
    before_block = "before_block"
    in_block = "in_block"
    after_block = "after_block"


class ParseOutcome(str, Enum):
    no_frontmatter = "no_frontmatter"                       # no delimiter line at all
    unterminated_frontmatter = "unterminated_frontmatter"   # opening delimiter only
    complete = "complete"


@dataclass
class FrontmatterBlock:
    """Key/value entries; a replaced key keeps the position of its first write."""
    entries: dict[str, FrontmatterValue] = field(default_factory=dict)

    def set(self, key: str, value: FrontmatterValue) -> None:
        self.entries[key] = value

    def get(self, key: str) -> Optional[FrontmatterValue]:
        return self.entries.get(key)

    def items(self) -> Iterator[tuple[str, FrontmatterValue]]:
        return iter(self.entries.items())

    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def to_dict(self) -> dict[str, Union[str, list[str]]]:
        """Plain-python view: scalars as str, tag lists as list."""
        return {
            k: list(v.items) if isinstance(v, TagList) else v.value
            for k, v in self.entries.items()
        }


@dataclass(frozen=True)
class ParsedTemplate:
    """Result of splitting a template into frontmatter and body."""
    frontmatter: FrontmatterBlock
    body: str
    outcome: ParseOutcome


@dataclass(frozen=True)
class Layer:
    """One named source of frontmatter values in the merge fold."""
    name: str
    entries: tuple[tuple[str, FrontmatterValue], ...] = ()


@dataclass(frozen=True)
class DerivedFields:
    """Caller-computed fields; None means the field is not supplied."""
    title: Optional[str] = None
    id: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
