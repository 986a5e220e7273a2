"""File and stream I/O for the assembler; OS errors surface as ReadFailure/WriteFailure"""

import sys
from pathlib import Path
from typing import TextIO

from mdassemble.core.errors import ReadFailure, WriteFailure


def read_template(path: Path, encoding: str = "utf-8") -> str:
    try:
        with open(path, encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(f"Cannot read template {path}: {e}") from e


def read_stdin(stream: TextIO = None) -> str:
    """Read the whole stream (default: stdin) to end of input."""
    stream = stream or sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(f"Cannot read standard input: {e}") from e


def write_output(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Create or overwrite path with content. No cleanup on a partial write."""
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except (OSError, UnicodeEncodeError) as e:
        raise WriteFailure(f"Cannot write output {path}: {e}") from e
