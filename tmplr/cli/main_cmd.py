"""Main CLI command: tmplr entry point."""

from typing import Annotated

import typer

from ..pipeline import RenderRequest, run_pipeline
from .formatting import _get_version, configure_logging, report_error
from .state import app, console


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tmplr {_get_version()}", highlight=False)
        raise typer.Exit(0)


@app.command()
def main(
    input_file: Annotated[
        str | None,
        typer.Option("--input", "-i", help="The input template file to parse"),
    ] = None,
    output_file: Annotated[
        str | None,
        typer.Option("--output", "-o", help="The desired output file location"),
    ] = None,
    var: Annotated[
        list[str] | None,
        typer.Option("--var", "-v", help="Template variable (name=value, repeatable)"),
    ] = None,
    json_source: Annotated[
        str | None,
        typer.Option("--json", "-j", help="Template variables as JSON, or a JSON file"),
    ] = None,
    yaml_source: Annotated[
        str | None,
        typer.Option("--yaml", "-y", help="Template variables as YAML, or a YAML file"),
    ] = None,
    autoescape: Annotated[
        bool,
        typer.Option("--autoescape", help="HTML-escape substituted values"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log pipeline steps to stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """tmplr: render a template file with variables from flags, JSON or YAML."""
    configure_logging(verbose)

    request = RenderRequest(
        input_path=input_file,
        output_path=output_file,
        variables=tuple(var or ()),
        json_source=json_source,
        yaml_source=yaml_source,
        autoescape=autoescape,
    )
    result = run_pipeline(request)
    if result.error is not None:
        report_error(result.error)
        raise typer.Exit(result.exit_code)
