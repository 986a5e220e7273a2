"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdassemble.cli.commands import assemble_cmd


app = typer.Typer(name="mdassemble", help="Assemble a markdown document from a template, frontmatter, and stdin")

app.command(name="assemble")(assemble_cmd)
