"""
Theme configuration persistence layer.

Handles reading and writing theme configurations to themes.yaml in the
project root, plus semantic validation and scaffolding.

Default location: {project_root}/themes.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ThemeConfigError
from .ir.themes import InlineTheme, NamedTheme, ThemeConfig
from .strings import SELECTOR_PLACEHOLDER

logger = logging.getLogger(__name__)

THEMES_FILE = "themes.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the themes.yaml file path."""
    return project_root / THEMES_FILE


def config_exists(project_root: Path) -> bool:
    """Check if a themes.yaml exists in the project."""
    return get_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def load_theme_config(project_root: Path, *, use_defaults: bool = True) -> ThemeConfig:
    """Load the theme configuration from themes.yaml.

    Args:
        project_root: Project root directory.
        use_defaults: If True, return the default configuration when the file doesn't exist.

    Returns:
        ThemeConfig instance.

    Raises:
        ThemeConfigError: If file doesn't exist (when use_defaults=False) or invalid.
    """
    config_path = get_config_path(project_root)

    if not config_path.exists():
        if use_defaults:
            logger.debug("No themes.yaml found, using defaults")
            return create_default_config()
        raise ThemeConfigError(f"Theme configuration not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data:
            if use_defaults:
                logger.warning(f"Empty themes.yaml at {config_path}, using defaults")
                return create_default_config()
            raise ThemeConfigError(f"Empty or invalid YAML in {config_path}")

        if not isinstance(data, dict):
            raise ThemeConfigError(f"Expected a mapping at the top of {config_path}")

        return ThemeConfig.from_mapping(data)

    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid theme configuration in {config_path}: {e}") from e


def save_theme_config(project_root: Path, config: ThemeConfig) -> Path:
    """Save the theme configuration to themes.yaml.

    Returns:
        Path to the saved themes.yaml file.
    """
    config_path = get_config_path(project_root)

    config_path.write_text(
        yaml.dump(
            config.to_mapping(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved theme configuration to {config_path}")
    return config_path


# =============================================================================
# Validation
# =============================================================================


class ThemeConfigValidationResult:
    """Result of theme configuration validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return (
            f"ThemeConfigValidationResult(errors={len(self.errors)}, "
            f"warnings={len(self.warnings)})"
        )


def validate_theme_config(config: ThemeConfig) -> ThemeConfigValidationResult:
    """Validate a theme configuration for semantic correctness."""
    result = ThemeConfigValidationResult()

    if isinstance(config.default, NamedTheme) and config.default.name not in config.themes:
        result.add_error(f"default names theme '{config.default.name}', which is not defined")
    if isinstance(config.default, InlineTheme) and not config.default.values:
        result.add_warning("default is an empty inline theme")

    if config.selector is None:
        result.add_warning("No selector template: scoped theme blocks will not be emitted")
    elif SELECTOR_PLACEHOLDER not in config.selector:
        result.add_warning(
            f"selector '{config.selector}' has no '{SELECTOR_PLACEHOLDER}' placeholder; "
            "every theme will share the same selector"
        )

    for name, values in config.themes.items():
        if not values:
            result.add_warning(f"Theme '{name}' defines no style values")

    if not config.themes and config.default is None:
        result.add_warning("No themes and no default theme are configured")

    return result


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_config() -> ThemeConfig:
    """Create a starter configuration with light and dark themes."""
    return ThemeConfig(
        themes={
            "light": {
                "color": "#1f2328",
                "bg": "#ffffff",
                "border-color": "#d0d7de",
                "accent": "#0969da",
            },
            "dark": {
                "color": "#e6edf3",
                "bg": "#0d1117",
                "border-color": "#30363d",
                "accent": "#4493f8",
            },
        },
        default=NamedTheme(name="light"),
    )


def scaffold_theme_config(project_root: Path, *, overwrite: bool = False) -> Path | None:
    """Create a default themes.yaml file.

    Args:
        project_root: Project root directory.
        overwrite: If True, overwrite existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    config_path = get_config_path(project_root)

    if config_path.exists() and not overwrite:
        logger.debug(f"Skipping existing theme configuration: {config_path}")
        return None

    return save_theme_config(project_root, create_default_config())
