"""Exceptions raised by the boilgen core.

Filesystem failures are not wrapped: ``OSError`` propagates as-is.
"""

from pathlib import Path


class BoilgenError(Exception):
    """Base class for all boilgen errors."""


class CatalogNotFoundError(BoilgenError):
    """No catalog file exists at the resolved path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No templates found at {path}")


class CatalogMalformedError(BoilgenError):
    """The catalog file exists but cannot be parsed or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid templates file {path}: {reason}")


class TemplateNotFoundError(BoilgenError):
    """An entity type or template name is not present in the catalog."""

    def __init__(self, entity_type: str, template_name: str | None = None) -> None:
        self.entity_type = entity_type
        self.template_name = template_name
        if template_name is None:
            message = f"Entity type '{entity_type}' not found in templates"
        else:
            message = (
                f"Template '{template_name}' not found for entity type "
                + f"'{entity_type}'"
            )
        super().__init__(message)


class TargetAlreadyExistsError(BoilgenError):
    """The entity's target directory is already present."""

    def __init__(self, entity_type: str, target: Path) -> None:
        self.entity_type = entity_type
        self.target = target
        super().__init__(f"{entity_type} '{target.name}' already exists.")


class InvalidEntityNameError(BoilgenError):
    """The requested entity name cannot be used as a directory name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid name '{name}': {reason}")


class InvalidPathTemplateError(BoilgenError):
    """A single file spec's path template cannot be written."""

    def __init__(self, path_template: str, reason: str) -> None:
        self.path_template = path_template
        self.reason = reason
        super().__init__(f"Invalid file path in template: {path_template} ({reason})")
