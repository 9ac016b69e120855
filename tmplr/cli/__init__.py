"""CLI package for tmplr."""

from .main_cmd import main
from .state import app


def cli() -> None:
    """CLI entrypoint."""
    app(prog_name="tmplr")


__all__ = [
    "app",
    "cli",
    "main",
]


if __name__ == "__main__":
    cli()
