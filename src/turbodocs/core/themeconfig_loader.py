"""
ThemeConfig persistence layer for TurboDocs.

Handles reading and writing theme configuration documents to
themeconfig.yaml in the docs project root, and building the
ThemeConfiguration handed to the site renderer from them.

Default location: {project_root}/themeconfig.yaml
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, ThemeConfigError
from .ir.markup import element
from .ir.themeconfig import TITLE_PLACEHOLDER, ThemeConfigDocument, ThemeConfiguration
from .themeconfig import Clock, build_theme_config, config_error_from_validation, system_clock

logger = logging.getLogger(__name__)

THEMECONFIG_FILE = "themeconfig.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_themeconfig_path(project_root: Path) -> Path:
    """Get the themeconfig.yaml file path."""
    return project_root / THEMECONFIG_FILE


def themeconfig_exists(project_root: Path) -> bool:
    """Check if a themeconfig.yaml exists in the project."""
    return get_themeconfig_path(project_root).exists()


# =============================================================================
# Defaults
# =============================================================================


def create_default_document() -> ThemeConfigDocument:
    """The TurboCore documentation theme."""
    return ThemeConfigDocument(
        product_name="TurboCore",
        logo=element("h1", "TurboCore Docs"),
        project_link="https://blog.samiyousef.ca",
        title_template=f"{TITLE_PLACEHOLDER} - TurboCore",
        description="API documentation for TurboCore",
        dark_mode=True,
        primary_hue=212,
        footer_template=element("span", "{{year}} © {{product_name}}."),
    )


def build_from_document(
    document: ThemeConfigDocument,
    *,
    clock: Clock | None = None,
) -> ThemeConfiguration:
    """Render a document into a ThemeConfiguration.

    The footer template is evaluated once with the clock's current year.
    """
    return build_theme_config(
        logo=document.logo,
        project_link=document.project_link,
        title_template=document.title_template,
        description=document.description,
        dark_mode=document.dark_mode,
        primary_hue=document.primary_hue,
        footer_text=document.footer_template,
        clock=clock,
        product_name=document.product_name,
    )


# =============================================================================
# Loading
# =============================================================================


def _with_source(error: ThemeConfigError, source: Path) -> ThemeConfigError:
    """Return ``error`` with ``source`` recorded as the file it came from."""
    if error.context is None:
        return ThemeConfigError(error.message, ErrorContext(field="<root>", file=source))
    if error.context.file is not None:
        return error
    return ThemeConfigError(error.message, replace(error.context, file=source))


def parse_document(data: dict[str, Any], source: Path | None = None) -> ThemeConfigDocument:
    """Parse a ThemeConfigDocument from raw YAML data.

    Raises:
        ThemeConfigError: If the data does not match the schema.
    """
    try:
        return ThemeConfigDocument.model_validate(data)
    except ValidationError as e:
        error = config_error_from_validation(e)
        if source is not None:
            error = _with_source(error, source)
        raise error from e


def load_document(project_root: Path, *, use_defaults: bool = True) -> ThemeConfigDocument:
    """Load the themeconfig.yaml document.

    Args:
        project_root: Root directory of the docs project.
        use_defaults: If True, return the default document when the file doesn't exist.

    Raises:
        ThemeConfigError: If the file doesn't exist (when use_defaults=False) or is invalid.
    """
    path = get_themeconfig_path(project_root)

    if not path.exists():
        if use_defaults:
            logger.debug("No themeconfig.yaml found, using defaults")
            return create_default_document()
        raise ThemeConfigError(f"Theme configuration not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except OSError as e:
        raise ThemeConfigError(f"Unable to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty themeconfig.yaml at {path}, using defaults")
            return create_default_document()
        raise ThemeConfigError(f"Empty or invalid YAML in {path}")
    if not isinstance(data, dict):
        raise ThemeConfigError(
            f"Expected a mapping at the top of {path}", ErrorContext(field="<root>", file=path)
        )

    return parse_document(data, source=path)


def load_themeconfig(
    project_root: Path,
    *,
    clock: Clock | None = None,
    use_defaults: bool = True,
) -> ThemeConfiguration:
    """Load themeconfig.yaml and build the ThemeConfiguration.

    Args:
        project_root: Root directory of the docs project.
        clock: Source of the current time for the footer year.
        use_defaults: If True, fall back to the TurboCore defaults when no file exists.

    Returns:
        ThemeConfiguration instance.

    Raises:
        ThemeConfigError: If the document is missing (when use_defaults=False) or invalid.
    """
    document = load_document(project_root, use_defaults=use_defaults)
    path = get_themeconfig_path(project_root)
    try:
        return build_from_document(document, clock=clock)
    except ThemeConfigError as e:
        if not path.exists():
            raise
        raise _with_source(e, path) from e


def save_themeconfig(project_root: Path, document: ThemeConfigDocument) -> Path:
    """Save a document to themeconfig.yaml.

    Returns:
        Path to the saved file.
    """
    path = get_themeconfig_path(project_root)
    data = document.model_dump(mode="json")
    data["logo"] = document.logo.to_data()
    data["footer_template"] = document.footer_template.to_data()

    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved theme configuration to {path}")
    return path


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


def validate_themeconfig(
    config: ThemeConfiguration,
    *,
    clock: Clock | None = None,
    product_name: str = "",
) -> ThemeConfigValidationResult:
    """Check a built configuration for problems the schema does not catch.

    Args:
        config: Configuration to check.
        clock: Source of the current time for the footer year check.
        product_name: Expected brand in titles and footer, if known.

    Returns:
        ThemeConfigValidationResult with errors and warnings.
    """
    result = ThemeConfigValidationResult()
    now: datetime = (clock or system_clock)()

    # The provider is arbitrary user code; its failure is reported, not raised
    try:
        seo = config.seo_metadata()
    except Exception as e:
        result.add_error(f"seo_metadata_provider raised {type(e).__name__}: {e}")
        seo = None

    if seo is not None:
        if not seo.description.strip():
            result.add_error("seo.description is empty")
        elif len(seo.description) > 160:
            result.add_warning(
                f"seo.description is {len(seo.description)} characters; "
                "search engines truncate after about 160"
            )
        if product_name and product_name not in seo.title_template:
            result.add_warning(
                f"seo.title_template does not mention {product_name!r}: {seo.title_template!r}"
            )

    if config.project_link.startswith("http://"):
        result.add_warning(f"project_link uses plain http: {config.project_link}")

    footer_text = config.footer.text.text_content()
    if str(now.year) not in footer_text:
        result.add_warning(f"footer.text does not contain the current year {now.year}")
    if "{{" in footer_text:
        result.add_error(f"footer.text has unrendered template variables: {footer_text!r}")
    if product_name and product_name not in footer_text:
        result.add_warning(f"footer.text does not mention {product_name!r}")

    return result


# =============================================================================
# Scaffolding
# =============================================================================


def scaffold_themeconfig(project_root: Path, *, overwrite: bool = False) -> Path | None:
    """Create a default themeconfig.yaml file.

    Args:
        project_root: Root directory of the docs project.
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    path = get_themeconfig_path(project_root)

    if path.exists() and not overwrite:
        logger.debug(f"Skipping existing themeconfig: {path}")
        return None

    project_root.mkdir(parents=True, exist_ok=True)
    return save_themeconfig(project_root, create_default_document())
