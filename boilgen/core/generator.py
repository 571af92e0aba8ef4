"""Entity generation orchestration.

Ties the catalog, variable resolution and materializer together:

1. refuse to run if the entity directory already exists,
2. create the entity directory,
3. resolve variables once for the whole run,
4. write every file spec of the chosen template.

The existence check and the directory creation are not atomic; this is an
interactive single-user tool.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path, PurePosixPath

from boilgen.core.catalog import Catalog, get_template, load_catalog
from boilgen.core.errors import (
    CatalogNotFoundError,
    InvalidEntityNameError,
    TargetAlreadyExistsError,
)
from boilgen.core.materializer import MaterializeReport, materialize
from boilgen.core.path_validator import is_valid_file_path
from boilgen.core.seeder import write_default_catalog
from boilgen.core.variables import VariableSet, resolve_variables
from boilgen.helpers.settings import is_in_config_dir


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate one entity.

    Attributes:
        entity_type: Catalog entity type (e.g. 'Component').
        template_name: Template within the entity type (e.g. 'default').
        entity_name: Name of the directory to create (e.g. 'Button').
        base_dir: Directory the entity directory is created in.
        workspace_root: Workspace root, or None outside a workspace.
        workspace_name: Workspace display name.
        now: Timestamp for time variables; current local time when None.
    """

    entity_type: str
    template_name: str
    entity_name: str
    base_dir: Path
    workspace_root: Path | None = None
    workspace_name: str = ""
    now: datetime | None = None


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a successful generation run."""

    target_root: Path
    variables: VariableSet
    report: MaterializeReport


def resolve_target_root(base_dir: Path, entity_name: str) -> Path:
    """Return the entity directory for ``entity_name`` under ``base_dir``.

    Nested names such as ``widgets/Button`` are allowed as long as they stay
    inside ``base_dir``.

    Raises:
        InvalidEntityNameError: If the name is empty, contains reserved
            characters, is absolute, or leaves ``base_dir``.
    """
    name = entity_name.strip()
    if not name:
        raise InvalidEntityNameError(entity_name, "name is empty")
    if not is_valid_file_path(name):
        raise InvalidEntityNameError(entity_name, "contains a reserved character")

    relative = PurePosixPath(name.replace("\\", "/"))
    if relative.is_absolute() or ".." in relative.parts or not relative.parts:
        raise InvalidEntityNameError(entity_name, "must be a path inside the target folder")

    return base_dir.joinpath(*relative.parts)


def generate_entity(catalog: Catalog, request: GenerationRequest) -> GenerationResult:
    """Generate one entity from the catalog.

    Raises:
        TemplateNotFoundError: If the entity type or template is unknown.
        InvalidEntityNameError: If the entity name is unusable.
        TargetAlreadyExistsError: If the entity directory exists; nothing is
            written.
        OSError: On filesystem failure; files already written are kept.
    """
    template = get_template(catalog, request.entity_type, request.template_name)
    target_root = resolve_target_root(request.base_dir, request.entity_name)

    if target_root.exists():
        raise TargetAlreadyExistsError(request.entity_type, target_root)

    target_root.mkdir(parents=True)

    now = request.now or datetime.now().astimezone()
    variables = resolve_variables(
        target_root,
        request.workspace_root,
        request.workspace_name,
        now,
    )
    report = materialize(target_root, template, variables)

    return GenerationResult(target_root=target_root, variables=variables, report=report)


def load_catalog_or_seed(path: Path) -> Catalog | None:
    """Load the catalog, seeding the default one when it is missing.

    Seeding only happens for paths inside the conventional config directory
    (``.vscode``); a missing user-configured catalog is an error.

    Returns:
        The catalog, or None if a default catalog was just written and the
        user should review it before generating.

    Raises:
        CatalogNotFoundError: If the catalog is missing outside the config
            directory.
        CatalogMalformedError: If the catalog cannot be parsed.
    """
    try:
        return load_catalog(path)
    except CatalogNotFoundError:
        if not is_in_config_dir(path):
            raise
        write_default_catalog(path)
        return None
