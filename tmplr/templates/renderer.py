"""Select the output sink and render compiled templates into it."""

import io
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TextIO

from jinja2 import Environment, Template, TemplateError

from ..errors import OutputError, RenderError

logger = logging.getLogger(__name__)


@contextmanager
def open_sink(output_path: str | Path | None = None) -> Iterator[TextIO]:
    """Yield the stream rendered output goes to.

    Without a path this is standard output, which is never closed. With a
    path the file is created (or truncated) and closed when the block exits.

    Raises:
        OutputError: If the output file cannot be created
    """
    if not output_path:
        logger.debug("Writing to standard output")
        yield sys.stdout
        return

    path = Path(output_path).expanduser()
    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise OutputError(exc) from exc

    logger.debug("Writing to %s", path)
    with f:
        yield f


def render_template(template: Template, variables: dict[str, Any], sink: TextIO) -> None:
    """Render ``template`` with ``variables`` into ``sink``.

    Names missing from ``variables`` render empty. Output already written
    to the sink is left in place if rendering fails part way.

    Raises:
        RenderError: If template execution or writing to the sink fails for
            any reason, including errors raised by template expressions
    """
    try:
        template.stream(variables).dump(sink)
        sink.flush()
    except Exception as exc:
        raise RenderError(exc) from exc


def render_string(template_str: str, variables: dict[str, Any], *, autoescape: bool = False) -> str:
    """Render a template given as a string and return the result."""
    env = Environment(autoescape=autoescape, keep_trailing_newline=True)
    try:
        template = env.from_string(template_str)
    except TemplateError as exc:
        raise RenderError(exc) from exc

    buffer = io.StringIO()
    render_template(template, variables, buffer)
    return buffer.getvalue()
