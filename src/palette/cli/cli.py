"""CLI entrypoint: Typer app definition and command registration"""

import typer

from palette.cli.commands import describe_cmd, parse_cmd, preview_cmd, ref_cmd


app = typer.Typer(name="palette", no_args_is_help=True, help="Resource file parser and reference formatter")

app.command(name="parse")(parse_cmd)
app.command(name="preview")(preview_cmd)
app.command(name="ref")(ref_cmd)
app.command(name="describe")(describe_cmd)
