"""Template resolution, variable substitution and file generation."""

from boilgen.core.catalog import Catalog, Template, TemplateGroup, load_catalog
from boilgen.core.generator import (
    GenerationRequest,
    GenerationResult,
    generate_entity,
    load_catalog_or_seed,
)
from boilgen.core.materializer import MaterializeReport, materialize
from boilgen.core.path_validator import is_valid_file_path
from boilgen.core.seeder import DEFAULT_CATALOG, write_default_catalog
from boilgen.core.substitution import substitute
from boilgen.core.variables import VARIABLE_NAMES, VariableSet, resolve_variables

__all__ = [
    "DEFAULT_CATALOG",
    "VARIABLE_NAMES",
    "Catalog",
    "GenerationRequest",
    "GenerationResult",
    "MaterializeReport",
    "Template",
    "TemplateGroup",
    "VariableSet",
    "generate_entity",
    "is_valid_file_path",
    "load_catalog",
    "load_catalog_or_seed",
    "materialize",
    "resolve_variables",
    "substitute",
    "write_default_catalog",
]
