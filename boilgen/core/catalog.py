"""Template catalog loader.

A catalog maps entity types to named templates, and each template maps
file path templates to content lines::

    {
      "Component": {
        "default": {
          "$TM_FILENAME_BASE.tsx": ["export const $TM_FILENAME_BASE = 1;"],
          "__tests__/buildName.spec.ts": [""]
        }
      }
    }

Catalogs are JSON; files ending in ``.yaml``/``.yml`` are read as YAML with
the same shape. Loading is all-or-nothing and never cached, so hand edits are
picked up on the next run.
"""

import json
from pathlib import Path
from typing import cast

import yaml

from boilgen.config import CATALOG_ENCODING
from boilgen.core.errors import (
    CatalogMalformedError,
    CatalogNotFoundError,
    TemplateNotFoundError,
)
from boilgen.core.substitution import find_placeholders
from boilgen.core.variables import VARIABLE_NAMES

# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

Template = dict[str, list[str]]
"""File path template -> content lines."""

TemplateGroup = dict[str, Template]
"""Template name -> template."""

Catalog = dict[str, TemplateGroup]
"""Entity type -> template group."""

_YAML_SUFFIXES = (".yaml", ".yml")


# ---------------------------------------------------------------------------
# Parsing & validation
# ---------------------------------------------------------------------------


def _expect_mapping(value: object, where: str) -> dict[str, object]:
    """Return ``value`` as a str-keyed dict or raise ValueError."""
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected an object, got {type(value).__name__}")
    mapping = cast(dict[object, object], value)
    for key in mapping:
        if not isinstance(key, str):
            raise ValueError(f"{where}: keys must be strings, got {key!r}")
    return cast(dict[str, object], mapping)


def _parse_template(raw: object, where: str) -> Template:
    """Validate one template (path template -> list of lines)."""
    template: Template = {}
    for path_template, lines in _expect_mapping(raw, where).items():
        line_where = f"{where} -> '{path_template}'"
        if not isinstance(lines, list):
            raise ValueError(
                f"{line_where}: expected a list of lines, got {type(lines).__name__}"
            )
        items = cast(list[object], lines)
        for index, line in enumerate(items):
            if not isinstance(line, str):
                raise ValueError(
                    f"{line_where}[{index}]: expected a string, "
                    + f"got {type(line).__name__}"
                )
        template[path_template] = cast(list[str], items)
    return template


def parse_catalog(raw: object) -> Catalog:
    """Validate a decoded document against the three-level catalog shape.

    Args:
        raw: Decoded JSON/YAML document.

    Returns:
        The catalog, with the document's key order preserved.

    Raises:
        ValueError: If the document does not have the catalog shape.
    """
    catalog: Catalog = {}
    for entity_type, group_raw in _expect_mapping(raw, "catalog").items():
        group: TemplateGroup = {}
        group_where = f"'{entity_type}'"
        for template_name, template_raw in _expect_mapping(group_raw, group_where).items():
            group[template_name] = _parse_template(
                template_raw, f"{group_where} -> '{template_name}'",
            )
        catalog[entity_type] = group
    return catalog


def _decode(path: Path, text: str) -> object:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def load_catalog(path: Path) -> Catalog:
    """Read and validate the catalog file at ``path``.

    Raises:
        CatalogNotFoundError: If nothing exists at ``path``.
        CatalogMalformedError: If the file cannot be decoded or has the
            wrong shape.
    """
    if not path.exists():
        raise CatalogNotFoundError(path)

    if not path.is_file():
        raise CatalogMalformedError(path, "not a regular file")

    try:
        text = path.read_text(encoding=CATALOG_ENCODING)
    except UnicodeDecodeError as e:
        raise CatalogMalformedError(path, f"not valid {CATALOG_ENCODING}: {e}") from e

    try:
        raw = _decode(path, text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogMalformedError(path, str(e)) from e

    try:
        return parse_catalog(raw)
    except ValueError as e:
        raise CatalogMalformedError(path, str(e)) from e


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def list_entity_types(catalog: Catalog) -> list[str]:
    """List entity types in catalog order."""
    return list(catalog.keys())


def list_templates(catalog: Catalog, entity_type: str) -> list[str]:
    """List template names of an entity type in catalog order.

    Raises:
        TemplateNotFoundError: If the entity type is unknown.
    """
    group = catalog.get(entity_type)
    if group is None:
        raise TemplateNotFoundError(entity_type)
    return list(group.keys())


def get_template(catalog: Catalog, entity_type: str, template_name: str) -> Template:
    """Look up a single template.

    Raises:
        TemplateNotFoundError: If the entity type or template is unknown.
    """
    group = catalog.get(entity_type)
    if group is None:
        raise TemplateNotFoundError(entity_type)
    template = group.get(template_name)
    if template is None:
        raise TemplateNotFoundError(entity_type, template_name)
    return template


def find_unknown_variables(template: Template) -> list[str]:
    """Return placeholders used by a template that no variable defines.

    Such placeholders substitute to the empty string; listing them helps
    template authors spot typos.
    """
    known = set(VARIABLE_NAMES)
    unknown: list[str] = []
    for path_template, lines in template.items():
        for text in (path_template, *lines):
            for name in find_placeholders(text):
                if name not in known and name not in unknown:
                    unknown.append(name)
    return unknown
