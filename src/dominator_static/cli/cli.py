"""CLI entrypoint: Typer app definition and command registration"""

import typer

from dominator_static.cli.commands import build_cmd, render_cmd


app = typer.Typer(name="dominator-static", no_args_is_help=True, help="Convert HTML and Markdown into dominator builder code")

app.command(name="build")(build_cmd)
app.command(name="render")(render_cmd)
