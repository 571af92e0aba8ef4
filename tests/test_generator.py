"""Tests for entity generation orchestration."""

from datetime import datetime
from pathlib import Path

import pytest

from boilgen.core.catalog import load_catalog
from boilgen.core.errors import (
    CatalogMalformedError,
    CatalogNotFoundError,
    InvalidEntityNameError,
    TargetAlreadyExistsError,
    TemplateNotFoundError,
)
from boilgen.core.generator import (
    GenerationRequest,
    generate_entity,
    load_catalog_or_seed,
    resolve_target_root,
)
from boilgen.core.seeder import DEFAULT_CATALOG

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _request(
    base_dir: Path,
    *,
    entity_type: str = "Component",
    template_name: str = "default",
    entity_name: str = "Button",
    now: datetime | None = None,
) -> GenerationRequest:
    return GenerationRequest(
        entity_type=entity_type,
        template_name=template_name,
        entity_name=entity_name,
        base_dir=base_dir,
        workspace_root=base_dir.parent,
        workspace_name="ws",
        now=now,
    )


# ---------------------------------------------------------------------------
# Target root
# ---------------------------------------------------------------------------


class TestResolveTargetRoot:
    """Entity names map to a directory under the base directory."""

    def test_simple_name(self, tmp_path: Path) -> None:
        assert resolve_target_root(tmp_path, "Button") == tmp_path / "Button"

    def test_surrounding_whitespace_stripped(self, tmp_path: Path) -> None:
        assert resolve_target_root(tmp_path, "  Button \n") == tmp_path / "Button"

    def test_nested_name(self, tmp_path: Path) -> None:
        target = resolve_target_root(tmp_path, "widgets/Button")
        assert target == tmp_path / "widgets" / "Button"

    @pytest.mark.parametrize(
        "name",
        ["", "   ", "Bad:Name", "a|b", "../Up", "a/../../b", "/abs", ".", "./"],
    )
    def test_invalid_names_rejected(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(InvalidEntityNameError):
            resolve_target_root(tmp_path, name)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestGenerateEntity:
    """End-to-end generation against a real temporary directory."""

    def test_button_scenario(
        self, tmp_path: Path, button_catalog, fixed_now: datetime,
    ) -> None:
        base_dir = tmp_path / "src"
        base_dir.mkdir()

        result = generate_entity(button_catalog, _request(base_dir, now=fixed_now))

        assert result.target_root == base_dir / "Button"
        created = base_dir / "Button" / "Button.tsx"
        assert created.read_text(encoding="utf-8") == "export const Button = 1;"
        assert result.report.written == [created]
        assert result.report.skipped == []
        assert sorted(p.name for p in (base_dir / "Button").iterdir()) == ["Button.tsx"]

    def test_variables_shared_by_run(
        self, tmp_path: Path, fixed_now: datetime,
    ) -> None:
        catalog = {
            "Component": {
                "default": {
                    "a.txt": ["$CURRENT_YEAR-$CURRENT_MONTH-$CURRENT_DATE"],
                    "b.txt": ["$CURRENT_HOUR:$CURRENT_MINUTE:$CURRENT_SECOND"],
                    "c.txt": ["$WORKSPACE_NAME $RELATIVE_FILEPATH"],
                },
            },
        }
        base_dir = tmp_path / "src"
        base_dir.mkdir()

        result = generate_entity(catalog, _request(base_dir, now=fixed_now))

        root = result.target_root
        assert (root / "a.txt").read_text(encoding="utf-8") == "2024-03-05"
        assert (root / "b.txt").read_text(encoding="utf-8") == "14:07:09"
        assert (root / "c.txt").read_text(encoding="utf-8") == "ws src/Button/Button"
        assert result.variables["TM_FILENAME_BASE"] == "Button"

    def test_default_now_used_when_not_given(self, tmp_path: Path) -> None:
        catalog = {"Component": {"default": {"year.txt": ["$CURRENT_YEAR"]}}}

        result = generate_entity(catalog, _request(tmp_path))

        year = (result.target_root / "year.txt").read_text(encoding="utf-8")
        assert year == str(datetime.now().year)

    def test_existing_target_aborts_before_writing(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        existing = tmp_path / "Button"
        existing.mkdir()
        (existing / "keep.txt").write_text("mine", encoding="utf-8")

        with pytest.raises(TargetAlreadyExistsError) as exc_info:
            generate_entity(button_catalog, _request(tmp_path))

        assert str(exc_info.value) == "Component 'Button' already exists."
        assert sorted(p.name for p in existing.iterdir()) == ["keep.txt"]

    def test_existing_file_with_entity_name_aborts(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        (tmp_path / "Button").write_text("", encoding="utf-8")
        with pytest.raises(TargetAlreadyExistsError):
            generate_entity(button_catalog, _request(tmp_path))

    def test_unknown_template_creates_nothing(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        with pytest.raises(TemplateNotFoundError):
            generate_entity(button_catalog, _request(tmp_path, template_name="fancy"))
        assert not (tmp_path / "Button").exists()

    def test_unknown_entity_type_creates_nothing(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        with pytest.raises(TemplateNotFoundError):
            generate_entity(button_catalog, _request(tmp_path, entity_type="Page"))
        assert not (tmp_path / "Button").exists()

    def test_invalid_name_creates_nothing(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        with pytest.raises(InvalidEntityNameError):
            generate_entity(button_catalog, _request(tmp_path, entity_name="Bad:Name"))
        assert list(tmp_path.iterdir()) == []

    def test_nested_name_creates_parents(
        self, tmp_path: Path, button_catalog,
    ) -> None:
        result = generate_entity(
            button_catalog, _request(tmp_path, entity_name="widgets/Button"),
        )
        assert result.target_root == tmp_path / "widgets" / "Button"
        assert (tmp_path / "widgets" / "Button" / "Button.tsx").is_file()

    def test_empty_template_creates_only_directory(self, tmp_path: Path) -> None:
        catalog = {"Component": {"blank": {}}}
        result = generate_entity(catalog, _request(tmp_path, template_name="blank"))
        assert result.target_root.is_dir()
        assert list(result.target_root.iterdir()) == []

    def test_directory_kept_when_write_fails(self, tmp_path: Path) -> None:
        catalog = {
            "Component": {
                "default": {"a.txt": ["x"], "a.txt/b.txt": ["y"]},
            },
        }
        with pytest.raises(OSError):
            generate_entity(catalog, _request(tmp_path))

        assert (tmp_path / "Button" / "a.txt").is_file()


# ---------------------------------------------------------------------------
# Load or seed
# ---------------------------------------------------------------------------


class TestLoadCatalogOrSeed:
    """Missing catalogs are seeded only in the config directory."""

    def test_existing_catalog_loaded(self, write_catalog, button_catalog) -> None:
        path = write_catalog(button_catalog)
        assert load_catalog_or_seed(path) == button_catalog

    def test_missing_catalog_in_config_dir_seeded(self, workspace: Path) -> None:
        path = workspace / ".vscode" / "boilgen.templates.json"

        assert load_catalog_or_seed(path) is None
        assert load_catalog(path) == DEFAULT_CATALOG

    def test_config_dir_created_when_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "fresh" / ".vscode" / "boilgen.templates.json"
        assert load_catalog_or_seed(path) is None
        assert path.is_file()

    def test_missing_catalog_elsewhere_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "tools" / "templates.json"
        with pytest.raises(CatalogNotFoundError):
            load_catalog_or_seed(path)
        assert not path.exists()

    def test_malformed_catalog_not_overwritten(self, write_catalog) -> None:
        path = write_catalog("{broken")
        with pytest.raises(CatalogMalformedError):
            load_catalog_or_seed(path)
        assert path.read_text(encoding="utf-8") == "{broken"
