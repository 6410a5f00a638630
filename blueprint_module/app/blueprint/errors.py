# blueprint/errors.py

from typing import Any, List, Optional


class BlueprintError(Exception):
    """Base class for blueprint ingestion and render-preflight failures."""


class BlueprintValidationError(BlueprintError, ValueError):
    """Raised when raw input cannot be turned into a blueprint."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class BlueprintNotRenderableError(BlueprintError):
    """Raised by the render preflight; carries every violation found."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Blueprint not renderable:\n- " + "\n- ".join(self.errors))


class UnknownPresetError(BlueprintError, KeyError):
    """Raised when a format or overlay-pack preset name is not registered."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind} preset: {name!r}")

    def __str__(self) -> str:
        return self.args[0]
