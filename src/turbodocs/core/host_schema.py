"""
Host renderer schema export.

Maps a ThemeConfiguration onto the layout of the documentation renderer's
theme config (``logo``, ``project.link``, ``darkMode``, ``primaryHue``,
``footer.text`` and the SEO props returned by its SEO hook) and back.
Markup fragments are written as tagged dicts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, ExportError, ThemeConfigError
from .ir.markup import coerce_fragment
from .ir.themeconfig import ConstantSeoProvider, FooterSpec, ThemeConfiguration
from .themeconfig import config_error_from_validation

logger = logging.getLogger(__name__)

EXPORT_FORMATS: tuple[str, ...] = ("json", "yaml")

# Model attribute name -> host schema path
_HOST_KEYS = {
    "project_link": "project.link",
    "seo_metadata_provider": "seo",
    "dark_mode": "darkMode",
    "primary_hue": "primaryHue",
}
_HOST_SEO_KEYS = {"title_template": "titleTemplate"}


def to_host_schema(config: ThemeConfiguration, page: Any = None) -> dict[str, Any]:
    """Serialize a configuration in the host renderer's layout.

    The SEO provider is evaluated once (with ``page`` as context) and its
    output stored under ``seo``.
    """
    seo = config.seo_metadata(page)
    return {
        "logo": config.logo.to_data(),
        "project": {"link": config.project_link},
        "seo": {
            "titleTemplate": seo.title_template,
            "description": seo.description,
        },
        "darkMode": config.dark_mode,
        "primaryHue": config.primary_hue,
        "footer": {"text": config.footer.text.to_data()},
    }


def _require(data: dict[str, Any], path: str) -> Any:
    obj: Any = data
    for part in path.split("."):
        if not isinstance(obj, dict) or part not in obj:
            raise ThemeConfigError(
                "Missing required field in host schema", ErrorContext(field=path)
            )
        obj = obj[part]
    return obj


def from_host_schema(data: dict[str, Any]) -> ThemeConfiguration:
    """Read a configuration back from the host renderer's layout.

    The footer text is taken as stored; it is not re-rendered. Errors name
    the offending field by its host-schema path (e.g. ``seo.titleTemplate``).

    Raises:
        ThemeConfigError: If a field is missing or invalid.
    """
    try:
        seo = ConstantSeoProvider(
            title_template=_require(data, "seo.titleTemplate"),
            description=_require(data, "seo.description"),
        )
    except ValidationError as e:
        raise config_error_from_validation(e, "seo", _HOST_SEO_KEYS) from e

    try:
        footer = FooterSpec(text=coerce_fragment(_require(data, "footer.text")))
    except ValidationError as e:
        prefix = "footer" if e.title == FooterSpec.__name__ else "footer.text"
        raise config_error_from_validation(e, prefix) from e

    try:
        logo = coerce_fragment(_require(data, "logo"))
    except ValidationError as e:
        raise config_error_from_validation(e, "logo") from e

    try:
        return ThemeConfiguration(
            logo=logo,
            project_link=_require(data, "project.link"),
            seo_metadata_provider=seo,
            dark_mode=_require(data, "darkMode"),
            primary_hue=_require(data, "primaryHue"),
            footer=footer,
        )
    except ValidationError as e:
        raise config_error_from_validation(e, field_names=_HOST_KEYS) from e


def dump_host_schema(config: ThemeConfiguration, fmt: str = "json") -> str:
    """Render the host schema as JSON or YAML text."""
    data = to_host_schema(config)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    raise ExportError(f"Unsupported export format {fmt!r}; expected one of {EXPORT_FORMATS}")


def export_host_schema(config: ThemeConfiguration, path: Path, fmt: str | None = None) -> Path:
    """Write the host schema to ``path``.

    Args:
        config: Configuration to export.
        path: Output file.
        fmt: "json" or "yaml"; inferred from the file suffix when omitted.

    Returns:
        The written path.
    """
    if fmt is None:
        fmt = "yaml" if path.suffix in (".yaml", ".yml") else "json"
    if path.is_dir():
        raise ExportError(f"Export path is a directory: {path}")

    content = dump_host_schema(config, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Exported theme configuration to {path}")
    return path


def load_host_schema(path: Path) -> ThemeConfiguration:
    """Read an exported host schema file (JSON or YAML)."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeConfigError(f"Unable to read {path}: {e}") from e
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid host schema in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Expected a mapping in {path}")
    return from_host_schema(data)
