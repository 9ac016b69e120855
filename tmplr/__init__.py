"""tmplr: render text templates with variables from flags, JSON and YAML."""

__version__ = "0.1.0"

from .errors import (
    InvalidVariableError,
    MissingInputError,
    OutputError,
    RenderError,
    TemplateLoadError,
    TmplrError,
    VariableFormatError,
    VariableSourceError,
)
from .pipeline import RenderRequest, RenderResult, render_to_string, run_pipeline
from .variables import resolve_variables

__all__ = [
    "__version__",
    "RenderRequest",
    "RenderResult",
    "run_pipeline",
    "render_to_string",
    "resolve_variables",
    "TmplrError",
    "MissingInputError",
    "InvalidVariableError",
    "VariableSourceError",
    "VariableFormatError",
    "TemplateLoadError",
    "OutputError",
    "RenderError",
]
