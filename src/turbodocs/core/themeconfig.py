"""
ThemeConfiguration construction helpers.

Wraps model construction so that schema violations surface as
ThemeConfigError naming the offending field, and renders the
time-dependent footer text from an injected clock.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from .errors import ErrorContext, ThemeConfigError
from .ir.markup import MarkupFragment, MarkupKind, coerce_fragment
from .ir.themeconfig import ConstantSeoProvider, FooterSpec, ThemeConfiguration

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Wall-clock time, local timezone."""
    return datetime.now()


def render_template_vars(
    content: str,
    *,
    now: datetime,
    product_name: str = "",
    extra_vars: dict[str, str] | None = None,
) -> str:
    """Render template variables in footer/label content.

    Supported variables:
        - {{year}}: Calendar year of ``now``
        - {{product_name}}: Product name

    Args:
        content: Content string with template variables.
        now: Evaluation instant.
        product_name: Value for {{product_name}}.
        extra_vars: Additional variables to render.

    Returns:
        Content with variables replaced.
    """
    vars_map = {
        "{{year}}": str(now.year),
        "{{product_name}}": product_name,
    }
    if extra_vars:
        for key, value in extra_vars.items():
            vars_map[f"{{{{{key}}}}}"] = value

    result = content
    for var, value in vars_map.items():
        result = result.replace(var, value)
    return result


def render_fragment_vars(
    fragment: MarkupFragment,
    *,
    now: datetime,
    product_name: str = "",
) -> MarkupFragment:
    """Render template variables inside every text node of a fragment."""
    if fragment.kind == MarkupKind.TEXT:
        return fragment.model_copy(
            update={
                "text": render_template_vars(
                    fragment.text or "", now=now, product_name=product_name
                )
            }
        )
    children = tuple(
        render_fragment_vars(child, now=now, product_name=product_name)
        for child in fragment.children
    )
    return fragment.model_copy(update={"children": children})


def config_error_from_validation(
    exc: ValidationError,
    prefix: str = "",
    field_names: Mapping[str, str] | None = None,
) -> ThemeConfigError:
    """Translate a pydantic ValidationError into a ThemeConfigError for its first error.

    Args:
        exc: The validation failure.
        prefix: Dotted path of the model within the enclosing document.
        field_names: Renames for the top-level field, for documents whose keys
            differ from the model attribute names.
    """
    first = exc.errors()[0]
    loc = [str(part) for part in first["loc"]]
    if loc and field_names:
        loc[0] = field_names.get(loc[0], loc[0])
    parts = [prefix] if prefix else []
    parts.extend(loc)
    field = ".".join(parts) or "<root>"
    value = first.get("input")
    if isinstance(value, dict | list):
        value = None
    message = f"Invalid theme configuration: {first['msg']}"
    if len(exc.errors()) > 1:
        message += f" (and {len(exc.errors()) - 1} more error(s))"
    return ThemeConfigError(message, ErrorContext(field=field, value=value))


def build_theme_config(
    *,
    logo: MarkupFragment | str | dict[str, Any],
    project_link: str,
    seo_metadata_provider: Callable[..., Any] | None = None,
    title_template: str | None = None,
    description: str | None = None,
    dark_mode: bool,
    primary_hue: int,
    footer_text: MarkupFragment | str | dict[str, Any],
    clock: Clock | None = None,
    product_name: str = "",
) -> ThemeConfiguration:
    """Build and validate a ThemeConfiguration.

    Either pass ``seo_metadata_provider`` or both ``title_template`` and
    ``description``; the latter builds a ConstantSeoProvider. Template
    variables in the footer ({{year}}, {{product_name}}) are rendered once
    using ``clock``.

    Raises:
        ThemeConfigError: If any field violates its constraint.
    """
    now = (clock or system_clock)()

    if seo_metadata_provider is None:
        if title_template is None or description is None:
            raise ThemeConfigError(
                "title_template and description are required without a provider",
                ErrorContext(field="seo_metadata_provider"),
            )
        try:
            seo_metadata_provider = ConstantSeoProvider(
                title_template=title_template, description=description
            )
        except ValidationError as e:
            raise config_error_from_validation(e, "seo") from e

    try:
        footer = FooterSpec(
            text=render_fragment_vars(
                coerce_fragment(footer_text), now=now, product_name=product_name
            )
        )
    except ValidationError as e:
        prefix = "footer" if e.title == FooterSpec.__name__ else "footer.text"
        raise config_error_from_validation(e, prefix) from e

    try:
        return ThemeConfiguration(
            logo=logo,
            project_link=project_link,
            seo_metadata_provider=seo_metadata_provider,
            dark_mode=dark_mode,
            primary_hue=primary_hue,
            footer=footer,
        )
    except ValidationError as e:
        raise config_error_from_validation(e) from e
