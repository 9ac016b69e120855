"""Load template files into compiled Jinja2 templates."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, TemplateSyntaxError

from ..errors import MissingInputError, TemplateLoadError

logger = logging.getLogger(__name__)


def build_environment(search_path: str | Path, *, autoescape: bool = False) -> Environment:
    """Create the Jinja2 environment used to compile templates.

    Includes and extends resolve relative to ``search_path``. The template's
    final newline is kept so rendered files end the way their source does.
    """
    return Environment(
        loader=FileSystemLoader(str(search_path), encoding="utf-8"),
        autoescape=autoescape,
        keep_trailing_newline=True,
    )


def load_template(path: str | Path | None, *, autoescape: bool = False) -> Template:
    """Load and compile the template file at ``path``.

    Args:
        path: Template file to read
        autoescape: HTML-escape substituted values when rendering

    Returns:
        Compiled Jinja2 template

    Raises:
        MissingInputError: If no path was given
        TemplateLoadError: If the file cannot be read or fails to compile
    """
    if not path:
        raise MissingInputError()

    template_path = Path(path).expanduser()
    if not template_path.is_file():
        raise TemplateLoadError(f"open {path}: no such file")

    env = build_environment(template_path.parent, autoescape=autoescape)
    try:
        template = env.get_template(template_path.name)
    except TemplateSyntaxError as exc:
        raise TemplateLoadError(f"{path}:{exc.lineno}: {exc.message}") from exc
    except TemplateNotFound as exc:
        raise TemplateLoadError(f"template not found: {exc.name}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(f"{path}: {exc}") from exc

    logger.debug("Compiled template %s (autoescape=%s)", template_path, autoescape)
    return template
