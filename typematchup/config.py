"""ABOUTME: Configuration loaders for presentation settings.
ABOUTME: Handles loading and validating display.yml section titles."""

from pathlib import Path

import yaml
from pydantic import BaseModel, model_validator

from typematchup.effectiveness.dataclasses import Category
from typematchup.settings import settings


class SectionConfig(BaseModel):
    """Title and description for one effectiveness category section."""

    title: str
    description: str = ""


class DisplayConfig(BaseModel):
    """How effectiveness results are labelled by presentation code."""

    unicode_fractions: bool = False
    sections: dict[Category, SectionConfig]

    @model_validator(mode="after")
    def _check_all_categories(self) -> "DisplayConfig":
        missing = [c.value for c in Category if c not in self.sections]
        if missing:
            raise ValueError(f"Display config is missing sections for: {', '.join(missing)}")
        return self

    def get_section(self, category: Category) -> SectionConfig:
        """Return the section config for a category."""
        return self.sections[category]

    def ordered_sections(self) -> list[tuple[Category, SectionConfig]]:
        """Return sections from most to least damage taken."""
        return [(category, self.sections[category]) for category in reversed(Category)]


def load_display_config(config_path: Path | None = None) -> DisplayConfig:
    """Load display configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.display_config_path.

    Returns:
        Parsed DisplayConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = settings.display_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Display config not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    return DisplayConfig.model_validate(raw_config)
