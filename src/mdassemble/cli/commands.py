"""CLI command implementations"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Iterator, Optional

import typer

from mdassemble.config import Settings, load_config
from mdassemble.core.assemble import assemble_document
from mdassemble.core.errors import AssemblyError
from mdassemble.core.store import derive_fields, split_pair_args
from mdassemble.util.fs import read_stdin, read_template, write_output


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _fail(msg: str) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


@contextmanager
def _logging(level: str) -> Iterator[None]:
    """Route package log records to stderr for the duration of one command."""
    pkg_logger = logging.getLogger("mdassemble")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    previous = pkg_logger.level
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    try:
        yield
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.setLevel(previous)


def assemble_cmd(
    output: Annotated[Path, typer.Option("--output", "-o", help="Output file (overwritten)")],
    template: Annotated[Optional[Path], typer.Option("--template", help="Template file supplying frontmatter and body")] = None,
    frontmatter: Annotated[Optional[list[str]], typer.Option("--frontmatter", help="Comma-separated key=value pairs")] = None,
    string: Annotated[Optional[str], typer.Option("--string", "-s", help="Inline heading inserted before stdin content")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Set the title frontmatter field")] = None,
    tag: Annotated[Optional[list[str]], typer.Option("--tag", help="Add a tag (repeatable, order kept)")] = None,
    id_: Annotated[Optional[str], typer.Option("--id", help="Set the id frontmatter field")] = None,
    id_unix: Annotated[bool, typer.Option("--id-unix", help="Set id to the current UTC timestamp; beats --id")] = False,
    heading_level: Annotated[Optional[int], typer.Option("--heading-level", help="Markdown level of --string heading")] = None,
    key_order: Annotated[Optional[str], typer.Option("--key-order", help="insertion or sorted")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Write frontmatter + template body + heading + stdin to the output file."""
    settings = _settings(overrides={"heading_level": heading_level, "key_order": key_order})
    derived = derive_fields(title=title, literal_id=id_, id_unix=id_unix, tags=tag)

    with _logging("DEBUG" if verbose else settings.log_level):
        try:
            stdin_content = read_stdin()
            template_text = read_template(template) if template else None
            content = assemble_document(
                template_text, split_pair_args(frontmatter), derived, string, stdin_content, settings,
            )
            write_output(output, content)
        except AssemblyError as e:
            _fail(str(e))

    typer.echo(f"Content saved to {output}")
