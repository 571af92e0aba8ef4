#!/usr/bin/env python3
"""boilgen CLI - Main Entry Point.

Usage:
    boilgen <command> [options]

Commands:
    generate    Generate an entity (Component, Page, ...) from a template
    list        List entity types and templates in the catalog
    init        Write the default catalog
    variables   Show the variables a template would see
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import click

from boilgen import __version__
from boilgen.cli.prompts import prompt_select, prompt_text
from boilgen.config import (
    CONFIG_DIR_NAME,
    EXIT_CANCELLED,
    EXIT_ERROR,
    EXIT_OK,
)
from boilgen.core.catalog import (
    Catalog,
    find_unknown_variables,
    list_entity_types,
    list_templates,
)
from boilgen.core.errors import (
    BoilgenError,
    CatalogMalformedError,
    CatalogNotFoundError,
    TargetAlreadyExistsError,
)
from boilgen.core.generator import (
    GenerationRequest,
    generate_entity,
    load_catalog_or_seed,
    resolve_target_root,
)
from boilgen.core.seeder import write_default_catalog
from boilgen.core.variables import VARIABLE_NAMES, resolve_variables
from boilgen.helpers.helpers_logging import (
    print_error,
    print_file_tree,
    print_header,
    print_info,
    print_success,
    print_warning,
    set_quiet,
)
from boilgen.helpers.settings import resolve_templates_path
from boilgen.helpers.workspace import get_workspace_name, get_workspace_root

_DEST_TYPE = click.Path(file_okay=False, path_type=Path)


def _load_catalog(templates_path: Path) -> Catalog | int:
    """Load the catalog or report why it could not be used.

    Returns:
        The catalog, or an exit code when generation must stop.
    """
    try:
        catalog = load_catalog_or_seed(templates_path)
    except CatalogNotFoundError as e:
        print_error(str(e))
        return EXIT_ERROR
    except CatalogMalformedError as e:
        print_error("Invalid templates file.")
        print_info(f"  {e}")
        return EXIT_ERROR
    except OSError as e:
        print_error(f"Cannot read templates file {templates_path}: {e}")
        return EXIT_ERROR

    if catalog is None:
        print_warning(
            "No templates found. A default template file has been created "
            + f"in {CONFIG_DIR_NAME}."
        )
        print_info(f"  Edit {templates_path} and run 'boilgen generate' again.")
        return EXIT_OK

    if not catalog:
        print_error(f"No entity types defined in {templates_path}")
        return EXIT_ERROR

    return catalog


def run_generate(
    dest: Path | None,
    entity_type: str | None,
    template_name: str | None,
    entity_name: str | None,
    catalog_path: str | None,
) -> int:
    """Run the generate workflow, prompting for anything not given."""
    workspace_root = get_workspace_root()
    base_dir = (dest or Path.cwd()).resolve()
    templates_path = resolve_templates_path(workspace_root, catalog_path)

    loaded = _load_catalog(templates_path)
    if isinstance(loaded, int):
        return loaded
    catalog = loaded

    try:
        if entity_type is None:
            entity_type = prompt_select(
                "What do you want to generate? (e.g. Component, Page, Hook)",
                list_entity_types(catalog),
            )
            if entity_type is None:
                print_warning("Cancelled")
                return EXIT_CANCELLED

        if template_name is None:
            template_name = prompt_select(
                f"Choose a {entity_type} template",
                list_templates(catalog, entity_type),
            )
            if template_name is None:
                print_warning("Cancelled")
                return EXIT_CANCELLED

        if entity_name is None:
            entity_name = prompt_text(f"Enter {entity_type} name", f"My{entity_type}")
            if entity_name is None:
                print_warning("Cancelled")
                return EXIT_CANCELLED

        result = generate_entity(
            catalog,
            GenerationRequest(
                entity_type=entity_type,
                template_name=template_name,
                entity_name=entity_name,
                base_dir=base_dir,
                workspace_root=workspace_root,
                workspace_name=get_workspace_name(workspace_root),
            ),
        )
    except TargetAlreadyExistsError as e:
        print_warning(str(e))
        return EXIT_ERROR
    except BoilgenError as e:
        print_error(str(e))
        return EXIT_ERROR
    except OSError as e:
        print_error(f"Failed to write files: {e}")
        print_info("  Files written before the failure were left in place.")
        return EXIT_ERROR

    print_success(
        f"{entity_type} '{entity_name.strip()}' created using "
        + f"'{template_name}' template."
    )
    print_file_tree(result.target_root, result.report.written)
    if result.report.skipped:
        print_warning(
            f"{len(result.report.skipped)} file(s) skipped because of invalid paths"
        )
    return EXIT_OK


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="boilgen")
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Generate boilerplate from a JSON template catalog."""
    if ctx.invoked_subcommand is not None:
        return EXIT_OK

    click.echo(ctx.get_help())
    return EXIT_OK


@_click_cli.command(name="generate", help="Generate an entity from a catalog template")
@click.argument("dest", required=False, type=_DEST_TYPE)
@click.option("--type", "-t", "entity_type", help="Entity type (e.g. Component)")
@click.option("--template", "-T", "template_name", help="Template name within the type")
@click.option("--name", "-n", "entity_name", help="Name of the entity directory to create")
@click.option("--catalog", "-c", "catalog_path",
              help="Catalog file (default: .vscode/boilgen.templates.json)")
@click.option("--quiet", "-q", is_flag=True, help="Only print warnings and errors")
def generate_cmd(
    dest: Path | None,
    entity_type: str | None,
    template_name: str | None,
    entity_name: str | None,
    catalog_path: str | None,
    quiet: bool,
) -> int:
    set_quiet(quiet)
    return run_generate(dest, entity_type, template_name, entity_name, catalog_path)


@_click_cli.command(name="list", help="List entity types and templates")
@click.option("--catalog", "-c", "catalog_path", help="Catalog file")
@click.option("--files", is_flag=True, help="Also list each template's path templates")
def list_cmd(catalog_path: str | None, files: bool) -> int:
    workspace_root = get_workspace_root()
    templates_path = resolve_templates_path(workspace_root, catalog_path)

    loaded = _load_catalog(templates_path)
    if isinstance(loaded, int):
        return loaded

    print_header(f"Templates in {templates_path}")
    for entity_type, group in loaded.items():
        click.echo(f"\n{entity_type}")
        for template_name, template in group.items():
            click.echo(f"  {template_name} ({len(template)} file(s))")
            if files:
                for path_template in template:
                    click.echo(f"    - {path_template}")
            for name in find_unknown_variables(template):
                print_warning(
                    f"    ${name} is not a known variable and will be replaced "
                    + "with an empty string"
                )
    return EXIT_OK


@_click_cli.command(name="init", help="Write the default template catalog")
@click.option("--catalog", "-c", "catalog_path", help="Where to write the catalog")
@click.option("--force", is_flag=True, help="Overwrite an existing catalog")
def init_cmd(catalog_path: str | None, force: bool) -> int:
    workspace_root = get_workspace_root()
    templates_path = resolve_templates_path(workspace_root, catalog_path)

    if templates_path.exists() and not force:
        print_warning(f"Templates file already exists: {templates_path}")
        print_info("  Use --force to overwrite it.")
        return EXIT_ERROR

    write_default_catalog(templates_path)
    print_success(f"Created templates file: {templates_path}")
    return EXIT_OK


@_click_cli.command(name="variables", help="Show resolved variables for a would-be entity")
@click.argument("dest", required=False, type=_DEST_TYPE)
@click.option("--name", "-n", "entity_name", default="Example", show_default=True,
              help="Entity name to resolve variables for")
def variables_cmd(dest: Path | None, entity_name: str) -> int:
    workspace_root = get_workspace_root()
    base_dir = (dest or Path.cwd()).resolve()

    try:
        target_root = resolve_target_root(base_dir, entity_name)
    except BoilgenError as e:
        print_error(str(e))
        return EXIT_ERROR

    variables = resolve_variables(
        target_root,
        workspace_root,
        get_workspace_name(workspace_root),
        datetime.now().astimezone(),
    )
    width = max(len(name) for name in VARIABLE_NAMES) + 1
    for name in VARIABLE_NAMES:
        click.echo(f"${name:<{width}} {variables[name]}")
    return EXIT_OK


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="boilgen",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return EXIT_OK if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
