"""CLI entrypoint: Typer app definition and command registration"""

import typer

from fmconvert.cli.commands import convert_cmd


app = typer.Typer(name="fmconvert", add_completion=False,
                  help="Convert YAML (---) front matter to Zola TOML (+++) front matter")

app.command(name="convert")(convert_cmd)
