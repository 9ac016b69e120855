"""Shared CLI state: consoles and the Typer app."""

from __future__ import annotations

import typer
from rich.console import Console

# Rendered output goes to stdout directly; Rich consoles only carry messages
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

# Typer app
app = typer.Typer(
    name="tmplr",
    help="Render a Jinja2 template file with variables from flags, JSON or YAML.",
    epilog=(
        "Examples:\n"
        "  tmplr -i greeting.txt -v name=World\n"
        "  tmplr -i config.j2 -o config.ini --json vars.json\n"
        "  tmplr -i page.html --yaml 'title: Home' --autoescape\n"
        "  tmplr -i motd.txt -v host=web1 -y overrides.yaml"
    ),
    add_completion=False,
)
