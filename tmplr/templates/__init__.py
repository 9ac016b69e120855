"""Template loading and rendering on top of Jinja2."""

from .loader import build_environment, load_template
from .renderer import open_sink, render_string, render_template

__all__ = [
    "build_environment",
    "load_template",
    "open_sink",
    "render_string",
    "render_template",
]
