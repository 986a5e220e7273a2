"""Frontmatter serialization back into delimited block form"""

from mdassemble.core.models import FrontmatterBlock, FrontmatterValue, TagList
from mdassemble.core.parse import DELIMITER


KEY_ORDERS = ("insertion", "sorted")


def encode_entry(key: str, value: FrontmatterValue) -> list[str]:
    """Encode one entry as its output lines (no trailing newlines)."""
    if isinstance(value, TagList):
        return [f"{key}:"] + [f"- {item}" for item in value.items]
    return [f"{key}: {value.value}"]


def serialize(block: FrontmatterBlock, delimiter: str = DELIMITER, key_order: str = "insertion") -> str:
    """Return the block wrapped in delimiter lines, each line newline-terminated.

    key_order 'insertion' keeps first-write order; 'sorted' orders by key.
    """
    if key_order not in KEY_ORDERS:
        raise ValueError(f"Unknown key order {key_order!r}; expected one of {', '.join(KEY_ORDERS)}")
    entries = list(block.items())
    if key_order == "sorted":
        entries.sort(key=lambda kv: kv[0])

    lines = [delimiter]
    for key, value in entries:
        lines.extend(encode_entry(key, value))
    lines.append(delimiter)
    return "\n".join(lines) + "\n"
