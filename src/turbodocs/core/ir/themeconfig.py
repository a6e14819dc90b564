"""
ThemeConfiguration types for TurboDocs IR.

This module contains the theme configuration handed to the documentation
site renderer at generation start:
- Branding (logo, project link)
- SEO metadata provider (title template and default description)
- Color theme (dark mode toggle, primary hue)
- Footer content

All models are frozen. A configuration is built once per generation run and
only read afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from .markup import MarkupFragment, coerce_fragment

TITLE_PLACEHOLDER = "%s"

# Hue is an angle; 360 wraps to 0 and is not accepted as a distinct value
HUE_MIN = 0
HUE_MAX_EXCLUSIVE = 360

_URL_SCHEMES = frozenset({"http", "https"})


# =============================================================================
# SEO
# =============================================================================


def _check_title_template(v: str) -> str:
    count = v.count(TITLE_PLACEHOLDER)
    if count != 1:
        raise ValueError(
            f"title_template must contain exactly one {TITLE_PLACEHOLDER!r} placeholder, "
            f"found {count}"
        )
    return v


class SeoMetadata(BaseModel):
    """
    SEO metadata returned by a configuration's metadata provider.

    Attributes:
        title_template: Page title pattern with exactly one '%s' placeholder
        description: Default meta description
    """

    title_template: str
    description: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("title_template")
    @classmethod
    def validate_title_template(cls, v: str) -> str:
        """Ensure the template has exactly one placeholder."""
        return _check_title_template(v)

    def compose_title(self, page_title: str) -> str:
        """Substitute a page title into the template."""
        return self.title_template.replace(TITLE_PLACEHOLDER, page_title, 1)


class ConstantSeoProvider(BaseModel):
    """
    Metadata provider that returns the same values on every call.

    Instances are callable. Any page context passed by the renderer is
    accepted and ignored.
    """

    title_template: str
    description: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("title_template")
    @classmethod
    def validate_title_template(cls, v: str) -> str:
        return _check_title_template(v)

    def __call__(self, page: Any = None) -> SeoMetadata:
        return SeoMetadata(title_template=self.title_template, description=self.description)


# =============================================================================
# Footer
# =============================================================================


class FooterSpec(BaseModel):
    """
    Footer content block.

    Attributes:
        text: Footer fragment, typically '<year> © <owner>.'
    """

    text: MarkupFragment

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return coerce_fragment(v)
        return v

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: MarkupFragment) -> MarkupFragment:
        """Ensure footer text is non-empty."""
        if v.is_empty():
            raise ValueError("footer text cannot be empty")
        return v


# =============================================================================
# Root Model
# =============================================================================


class ThemeConfiguration(BaseModel):
    """
    Theme configuration consumed by the documentation site renderer.

    Attributes:
        logo: Brand mark shown in the site header
        project_link: Absolute URL associated with the project
        seo_metadata_provider: Callable producing SeoMetadata; takes an optional page context
        dark_mode: Whether the site offers a dark color scheme toggle
        primary_hue: Base hue in degrees [0, 360) for the generated palette
        footer: Footer content block
    """

    logo: MarkupFragment
    project_link: str
    seo_metadata_provider: Callable[..., SeoMetadata] = Field(exclude=True)
    dark_mode: StrictBool
    primary_hue: int = Field(strict=True, ge=HUE_MIN, lt=HUE_MAX_EXCLUSIVE)
    footer: FooterSpec

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("logo", mode="before")
    @classmethod
    def coerce_logo(cls, v: Any) -> Any:
        if isinstance(v, str):
            return coerce_fragment(v)
        return v

    @field_validator("logo")
    @classmethod
    def validate_logo(cls, v: MarkupFragment) -> MarkupFragment:
        """Ensure the logo displays something."""
        if v.is_empty():
            raise ValueError("logo cannot be empty")
        return v

    @field_validator("project_link")
    @classmethod
    def validate_project_link(cls, v: str) -> str:
        """Ensure project_link is an absolute http(s) URL."""
        if not v or v != v.strip():
            raise ValueError("project_link must be a non-empty URL without surrounding whitespace")
        parts = urlsplit(v)
        if parts.scheme not in _URL_SCHEMES or not parts.netloc:
            raise ValueError(f"project_link must be an absolute http(s) URL, got {v!r}")
        return v

    def seo_metadata(self, page: Any = None) -> SeoMetadata:
        """Call the metadata provider."""
        return self.seo_metadata_provider(page)

    def compose_title(self, page_title: str, page: Any = None) -> str:
        """Compose a browser title for a page."""
        return self.seo_metadata(page).compose_title(page_title)

    def palette(self, mode: str = "light") -> dict[str, str]:
        """Generate the color palette driven by primary_hue.

        Raises:
            ThemeConfigError: If the dark palette is requested with dark mode off.
        """
        from ..errors import make_config_error
        from ..oklch import generate_palette

        if mode == "dark" and not self.dark_mode:
            raise make_config_error(
                "dark palette requested but dark mode is disabled", field="dark_mode"
            )
        return generate_palette(self.primary_hue, mode=mode)


# =============================================================================
# Persisted Form
# =============================================================================


class ThemeConfigDocument(BaseModel):
    """
    User-facing themeconfig.yaml content.

    Same data as ThemeConfiguration, except the SEO values are stored
    directly and the footer is a template whose {{year}} and
    {{product_name}} variables are rendered when the configuration is built.

    Attributes:
        product_name: Product name used in template variables
        logo: Brand mark fragment
        project_link: Absolute project URL
        title_template: Page title pattern with one '%s' placeholder
        description: Default meta description
        dark_mode: Dark color scheme toggle
        primary_hue: Base hue in degrees [0, 360)
        footer_template: Footer fragment with template variables
    """

    product_name: str = ""
    logo: MarkupFragment
    project_link: str
    title_template: str
    description: str
    dark_mode: StrictBool = True
    primary_hue: int = Field(strict=True, ge=HUE_MIN, lt=HUE_MAX_EXCLUSIVE)
    footer_template: MarkupFragment

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("logo", "footer_template", mode="before")
    @classmethod
    def coerce_fragments(cls, v: Any) -> Any:
        if isinstance(v, str):
            return coerce_fragment(v)
        return v

    @field_validator("title_template")
    @classmethod
    def validate_title_template(cls, v: str) -> str:
        return _check_title_template(v)
