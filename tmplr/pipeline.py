"""Single-pass render pipeline: resolve variables, load template, render."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Literal

from .errors import TmplrError
from .templates import load_template, open_sink, render_template
from .variables import resolve_variables

logger = logging.getLogger(__name__)

RenderStatus = Literal["ok", "error"]


@dataclass(frozen=True)
class RenderRequest:
    """Inputs for one render run."""

    input_path: str | None
    output_path: str | None = None
    variables: tuple[str, ...] = ()
    json_source: str | None = None
    yaml_source: str | None = None
    autoescape: bool = False


@dataclass
class RenderResult:
    """Outcome of a render run."""

    status: RenderStatus
    error: TmplrError | None = None
    variables: dict[str, str] = field(default_factory=dict)
    output_path: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def run_pipeline(request: RenderRequest) -> RenderResult:
    """Run resolve, load, sink selection and render in order.

    The first stage to fail stops the run; its error is returned in the
    result rather than raised.
    """
    variables: dict[str, str] = {}
    try:
        variables = resolve_variables(
            request.variables, request.json_source, request.yaml_source
        )
        template = load_template(request.input_path, autoescape=request.autoescape)
        with open_sink(request.output_path) as sink:
            render_template(template, variables, sink)
    except TmplrError as exc:
        logger.debug("Render failed: %s", exc)
        return RenderResult(
            status="error",
            error=exc,
            variables=variables,
            output_path=request.output_path,
        )

    logger.debug("Rendered %s", request.input_path)
    return RenderResult(status="ok", variables=variables, output_path=request.output_path)


def render_to_string(request: RenderRequest) -> str:
    """Render ``request`` into memory, ignoring its output path.

    Raises:
        TmplrError: If any stage fails
    """
    variables = resolve_variables(request.variables, request.json_source, request.yaml_source)
    template = load_template(request.input_path, autoescape=request.autoescape)
    buffer = io.StringIO()
    render_template(template, variables, buffer)
    return buffer.getvalue()
