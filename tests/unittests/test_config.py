"""ABOUTME: Tests for the settings and config modules.
ABOUTME: Verifies display configuration loading and derived settings paths."""

from pathlib import Path

import pytest
from pydantic import ValidationError

import typematchup
from typematchup.config import DisplayConfig, SectionConfig, load_display_config
from typematchup.effectiveness.dataclasses import Category
from typematchup.settings import Settings, settings


class TestDisplayConfig:
    """Tests for DisplayConfig class."""

    def test_requires_every_category(self) -> None:
        """A config missing a category section is rejected."""
        with pytest.raises(ValidationError):
            DisplayConfig(sections={Category.WEAK: SectionConfig(title="Weak")})

    def test_ordered_sections(self) -> None:
        """Sections run from most to least damage taken."""
        config = DisplayConfig(sections={c: SectionConfig(title=c.value) for c in Category})
        assert [c for c, _ in config.ordered_sections()] == [
            Category.DOUBLE_WEAK,
            Category.WEAK,
            Category.NEUTRAL,
            Category.RESIST,
            Category.DOUBLE_RESIST,
            Category.IMMUNE,
        ]

    def test_get_section(self) -> None:
        """get_section returns the configured section."""
        config = DisplayConfig(sections={c: SectionConfig(title=c.value.upper()) for c in Category})
        assert config.get_section(Category.IMMUNE).title == "IMMUNE"


class TestLoadDisplayConfig:
    """Tests for load_display_config function."""

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_display_config(tmp_path / "nonexistent.yml")

    def test_load_resource_config(self, resources_folder: Path) -> None:
        """YAML section keys are parsed into categories."""
        config = load_display_config(resources_folder / "display.yml")

        assert config.unicode_fractions is True
        assert config.get_section(Category.DOUBLE_RESIST).title == "Takes ¼x from"
        assert config.get_section(Category.IMMUNE).description == "No damage"
        assert config.get_section(Category.WEAK).description == ""

    def test_load_invalid_category(self, tmp_path: Path) -> None:
        """Unknown category keys fail validation."""
        config_path = tmp_path / "display.yml"
        config_path.write_text("""
sections:
  superWeak:
    title: "8x"
""")

        with pytest.raises(ValidationError):
            load_display_config(config_path)

    def test_load_project_config(self) -> None:
        """The shipped display.yml is valid."""
        config = load_display_config()
        assert set(config.sections) == set(Category)


class TestSettings:
    """Tests for Settings class."""

    def test_export_path_derives_from_root(self, tmp_path: Path) -> None:
        """Data paths hang off PROJECT_ROOT."""
        custom = Settings(PROJECT_ROOT=tmp_path)
        assert custom.export_path == tmp_path / "data" / "curated" / "defensive_profiles.parquet"

    def test_configs_ship_inside_package(self, tmp_path: Path) -> None:
        """Config files resolve next to the installed package, whatever PROJECT_ROOT is."""
        custom = Settings(PROJECT_ROOT=tmp_path)
        package_dir = Path(typematchup.__file__).resolve().parent
        assert custom.configs_dir == package_dir / "configs"
        assert custom.logging_config_path.exists()
        assert custom.display_config_path.exists()

        config = load_display_config(custom.display_config_path)
        assert set(config.sections) == set(Category)

    def test_configs_dir_override(self, tmp_path: Path) -> None:
        """CONFIGS_DIR can point somewhere else."""
        custom = Settings(CONFIGS_DIR=tmp_path)
        assert custom.display_config_path == tmp_path / "display.yml"

    def test_cache_size_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CACHE_MAX_ENTRIES can be set from the environment."""
        monkeypatch.setenv("CACHE_MAX_ENTRIES", "32")
        assert Settings().CACHE_MAX_ENTRIES == 32

    def test_default_settings_have_configs(self) -> None:
        """The module-level settings point at existing config files."""
        assert settings.logging_config_path.exists()
        assert settings.display_config_path.exists()
