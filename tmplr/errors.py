"""User-facing error types raised by the render pipeline stages."""


class TmplrError(ValueError):
    """Base class for every fatal condition in a render run."""


class MissingInputError(TmplrError):
    """Raised when no template file was given."""

    def __init__(self) -> None:
        super().__init__("No input file provided!")


class InvalidVariableError(TmplrError):
    """Raised when an inline variable is not in name=value form."""

    def __init__(self, token: str, reason: str = "expected name=value") -> None:
        self.token = token
        super().__init__(f"Invalid variable '{token}' ({reason})")


class VariableSourceError(TmplrError):
    """Raised when a JSON or YAML variables file cannot be read."""

    def __init__(self, kind: str, path: str, cause: Exception) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Could not open the {kind} file at {path}: {cause}")


class VariableFormatError(TmplrError):
    """Raised when JSON or YAML variables fail to parse or are not a flat string map."""

    def __init__(self, kind: str, details: str) -> None:
        self.kind = kind
        super().__init__(f"Error parsing {kind}: {details}")


class TemplateLoadError(TmplrError):
    """Raised when the template file cannot be read or compiled."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Error parsing the input file: {details}")


class OutputError(TmplrError):
    """Raised when the output file cannot be created."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Error creating output file: {cause}")


class RenderError(TmplrError):
    """Raised when executing the template or writing the result fails."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Error applying template: {cause}")
