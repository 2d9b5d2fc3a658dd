"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides paths for packaged config files, exports, and the cache size."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings

from typematchup import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    CACHE_MAX_ENTRIES: int = 171
    """Size of the caller-side effectiveness cache (one slot per possible typing)."""

    CONFIGS_DIR: Path = Path(__file__).resolve().parent / "configs"
    """Directory with logging.yml and display.yml, shipped inside the package."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.CONFIGS_DIR

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_config_path(self) -> Path:
        """Path to the display.yml configuration file."""
        return self.configs_dir / "display.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def data_dir(self) -> Path:
        """Base data directory."""
        return self.PROJECT_ROOT / "data"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def export_path(self) -> Path:
        """Default Parquet file for exported defensive profiles."""
        return self.data_dir / "curated" / "defensive_profiles.parquet"


settings = Settings()
