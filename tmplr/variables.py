"""Resolve template variables from inline flags, JSON and YAML sources.

Sources are layered in a fixed order: inline ``name=value`` pairs first, then
JSON, then YAML. A later layer overwrites keys set by an earlier one, so YAML
wins over JSON and JSON wins over inline values.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidVariableError, VariableFormatError, VariableSourceError

logger = logging.getLogger(__name__)


def parse_var_string(var_string: str) -> tuple[str, str]:
    """Parse a 'name=value' string into (name, value).

    Only the first '=' separates name from value, so the value may contain
    further '=' characters. Name and value are kept as written.

    Raises:
        InvalidVariableError: If the string has no '=' or an empty name
    """
    if "=" not in var_string:
        raise InvalidVariableError(var_string)

    name, value = var_string.split("=", 1)
    if not name:
        raise InvalidVariableError(var_string, "empty variable name")

    return name, value


def parse_vars(var_list: Iterable[str]) -> dict[str, str]:
    """Parse 'name=value' strings into a dict. Later duplicates win."""
    result: dict[str, str] = {}
    for var_string in var_list:
        name, value = parse_var_string(var_string)
        result[name] = value
    return result


def _is_file(source: str) -> bool:
    try:
        return Path(source).expanduser().is_file()
    except (OSError, ValueError):
        return False


def _looks_like_json(source: str) -> bool:
    return source.lstrip().startswith("{")


def _looks_like_yaml(source: str) -> bool:
    stripped = source.strip()
    return (
        stripped.startswith("{")
        or "\n" in stripped
        or ": " in stripped
        or stripped.endswith(":")
    )


def _read_source(kind: str, source: str) -> str:
    path = Path(source).expanduser()
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise VariableSourceError(kind, source, exc) from exc
    except UnicodeDecodeError as exc:
        raise VariableFormatError(kind, f"{source} is not valid UTF-8: {exc}") from exc
    logger.debug("Read %s variables from %s", kind, path)
    return text


def _as_string_map(kind: str, data: Any) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise VariableFormatError(
            kind, f"expected a mapping of names to strings, got {type(data).__name__}"
        )

    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise VariableFormatError(
                kind,
                f"value for '{key}' must be a string, got {type(value).__name__}",
            )
        result[str(key)] = value
    return result


def load_json_source(source: str) -> dict[str, str]:
    """Load variables from a JSON file path or a literal JSON object.

    Raises:
        VariableSourceError: If the file cannot be opened
        VariableFormatError: If the content is not a JSON object of strings
    """
    if _is_file(source) or not _looks_like_json(source):
        text = _read_source("JSON", source)
    else:
        text = source
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VariableFormatError("JSON", str(exc)) from exc
    # JSON null is not a valid top-level document for variables
    if data is None:
        raise VariableFormatError("JSON", "expected a mapping of names to strings, got null")
    return _as_string_map("JSON", data)


def load_yaml_source(source: str) -> dict[str, str]:
    """Load variables from a YAML file path or a literal YAML mapping.

    Scalars keep their source text (``port: 8080`` gives ``"8080"``); nested
    mappings and sequences are rejected.

    Raises:
        VariableSourceError: If the file cannot be opened
        VariableFormatError: If the content is not a flat YAML mapping
    """
    if _is_file(source) or not _looks_like_yaml(source):
        text = _read_source("YAML", source)
    else:
        text = source
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise VariableFormatError("YAML", str(exc)) from exc
    return _as_string_map("YAML", data)


def _layer(target: dict[str, str], layer: dict[str, str], kind: str) -> None:
    overridden = sorted(key for key in layer if key in target)
    target.update(layer)
    logger.debug("Applied %d %s variable(s)", len(layer), kind)
    if overridden:
        logger.debug("%s variables overrode: %s", kind, ", ".join(overridden))


def resolve_variables(
    var_list: Iterable[str] | None = None,
    json_source: str | None = None,
    yaml_source: str | None = None,
) -> dict[str, str]:
    """Build the variable mapping: inline values, then JSON, then YAML.

    Args:
        var_list: Inline 'name=value' strings, applied in order
        json_source: JSON file path or literal JSON object
        yaml_source: YAML file path or literal YAML mapping

    Returns:
        Flat mapping of variable name to string value
    """
    variables: dict[str, str] = {}
    _layer(variables, parse_vars(var_list or []), "inline")
    if json_source:
        _layer(variables, load_json_source(json_source), "JSON")
    if yaml_source:
        _layer(variables, load_yaml_source(yaml_source), "YAML")
    return variables
