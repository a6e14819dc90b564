"""
TurboDocs - theme configuration for the TurboCore documentation site.

Supplies branding, SEO metadata, color theme and footer content to the
documentation site renderer.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ExportError, ThemeConfigError, TurboDocsError
from .core.ir import FooterSpec, MarkupFragment, SeoMetadata, ThemeConfiguration
from .theme import create_turbocore_config, load_config

__version__ = get_version()

__all__ = [
    "__version__",
    "ThemeConfiguration",
    "SeoMetadata",
    "FooterSpec",
    "MarkupFragment",
    "TurboDocsError",
    "ThemeConfigError",
    "ExportError",
    "create_turbocore_config",
    "load_config",
]
