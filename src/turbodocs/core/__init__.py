"""Core TurboDocs functionality: IR, construction, palette, persistence, host schema export."""

from . import ir
from .errors import ErrorContext, ExportError, ThemeConfigError, TurboDocsError
from .host_schema import export_host_schema, from_host_schema, to_host_schema
from .oklch import generate_palette
from .themeconfig import build_theme_config, render_template_vars
from .themeconfig_loader import (
    ThemeConfigValidationResult,
    load_themeconfig,
    save_themeconfig,
    scaffold_themeconfig,
    validate_themeconfig,
)

__all__ = [
    "ir",
    "TurboDocsError",
    "ThemeConfigError",
    "ExportError",
    "ErrorContext",
    "build_theme_config",
    "render_template_vars",
    "generate_palette",
    "to_host_schema",
    "from_host_schema",
    "export_host_schema",
    "ThemeConfigValidationResult",
    "load_themeconfig",
    "save_themeconfig",
    "scaffold_themeconfig",
    "validate_themeconfig",
]
