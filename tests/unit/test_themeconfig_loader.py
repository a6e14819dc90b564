"""Unit tests for themeconfig.yaml persistence and validation."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
import yaml

from turbodocs.core.errors import ThemeConfigError
from turbodocs.core.ir.markup import element
from turbodocs.core.ir.themeconfig import ConstantSeoProvider, ThemeConfigDocument
from turbodocs.core.themeconfig_loader import (
    create_default_document,
    get_themeconfig_path,
    load_document,
    load_themeconfig,
    save_themeconfig,
    scaffold_themeconfig,
    themeconfig_exists,
    validate_themeconfig,
)
from turbodocs.theme import create_turbocore_config, load_config


def _clock(year: int = 2025):
    return lambda: datetime(year, 3, 14)


def _write(project_root: Path, content: str) -> None:
    get_themeconfig_path(project_root).write_text(content, encoding="utf-8")


MINIMAL_YAML = """\
product_name: Acme
logo: Acme Docs
project_link: https://acme.dev
title_template: "%s | Acme"
description: Acme reference
dark_mode: false
primary_hue: 30
footer_template: "{{year}} © {{product_name}}."
"""


class TestLoading:
    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        assert not themeconfig_exists(tmp_path)
        config = load_themeconfig(tmp_path, clock=_clock())
        assert config == create_turbocore_config(clock=_clock())

    def test_missing_without_defaults(self, tmp_path: Path) -> None:
        with pytest.raises(ThemeConfigError, match="not found"):
            load_themeconfig(tmp_path, use_defaults=False)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        _write(tmp_path, "")
        assert load_document(tmp_path) == create_default_document()
        with pytest.raises(ThemeConfigError):
            load_document(tmp_path, use_defaults=False)

    def test_load_minimal(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML)
        config = load_themeconfig(tmp_path, clock=_clock(2027))
        assert config.logo.text_content() == "Acme Docs"
        assert config.project_link == "https://acme.dev"
        assert config.compose_title("Intro") == "Intro | Acme"
        assert config.dark_mode is False
        assert config.primary_hue == 30
        assert config.footer.text.text_content() == "2027 © Acme."

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        _write(tmp_path, "logo: [unclosed\n")
        with pytest.raises(ThemeConfigError, match="Invalid YAML"):
            load_themeconfig(tmp_path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        _write(tmp_path, "- one\n- two\n")
        with pytest.raises(ThemeConfigError):
            load_themeconfig(tmp_path)

    def test_out_of_range_hue_names_field_and_file(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML.replace("primary_hue: 30", "primary_hue: 360"))
        with pytest.raises(ThemeConfigError) as exc_info:
            load_themeconfig(tmp_path)
        context = exc_info.value.context
        assert context is not None
        assert context.field == "primary_hue"
        assert context.file == get_themeconfig_path(tmp_path)

    def test_relative_project_link_rejected(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML.replace("https://acme.dev", "/docs"))
        with pytest.raises(ThemeConfigError) as exc_info:
            load_themeconfig(tmp_path)
        assert exc_info.value.context.field == "project_link"
        assert exc_info.value.context.file == get_themeconfig_path(tmp_path)

    def test_empty_logo_names_field_and_file(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML.replace("logo: Acme Docs", "logo: \"  \""))
        with pytest.raises(ThemeConfigError) as exc_info:
            load_themeconfig(tmp_path)
        context = exc_info.value.context
        assert context.field == "logo"
        assert context.file == get_themeconfig_path(tmp_path)
        assert str(get_themeconfig_path(tmp_path)) in str(exc_info.value)

    def test_missing_field(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML.replace("description: Acme reference\n", ""))
        with pytest.raises(ThemeConfigError) as exc_info:
            load_themeconfig(tmp_path)
        assert exc_info.value.context.field == "description"

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML + "sidebar: true\n")
        with pytest.raises(ThemeConfigError):
            load_themeconfig(tmp_path)

    def test_empty_footer_rejected(self, tmp_path: Path) -> None:
        _write(tmp_path, MINIMAL_YAML.replace('"{{year}} © {{product_name}}."', '" "'))
        with pytest.raises(ThemeConfigError) as exc_info:
            load_themeconfig(tmp_path)
        assert exc_info.value.context.field == "footer.text"
        assert exc_info.value.context.file == get_themeconfig_path(tmp_path)

    def test_load_config_without_project(self) -> None:
        config = load_config(clock=_clock())
        assert config.footer.text.text_content() == "2025 © TurboCore."


class TestSaving:
    def test_save_and_load(self, tmp_path: Path) -> None:
        document = ThemeConfigDocument(
            product_name="Acme",
            logo=element("h1", "Acme", attributes={"class": "brand"}),
            project_link="https://acme.dev",
            title_template="%s | Acme",
            description="Acme reference",
            dark_mode=True,
            primary_hue=0,
            footer_template=element("span", "{{year}} © Acme."),
        )
        path = save_themeconfig(tmp_path, document)
        assert path == get_themeconfig_path(tmp_path)
        assert load_document(tmp_path) == document

    def test_saved_footer_keeps_template(self, tmp_path: Path) -> None:
        save_themeconfig(tmp_path, create_default_document())
        data = yaml.safe_load(get_themeconfig_path(tmp_path).read_text(encoding="utf-8"))
        assert data["footer_template"]["children"][0]["text"] == "{{year}} © {{product_name}}."
        assert data["primary_hue"] == 212

    def test_scaffold(self, tmp_path: Path) -> None:
        project = tmp_path / "docs"
        path = scaffold_themeconfig(project)
        assert path is not None and path.exists()
        assert scaffold_themeconfig(project) is None
        assert scaffold_themeconfig(project, overwrite=True) == path
        assert load_themeconfig(project, clock=_clock()) == create_turbocore_config(clock=_clock())


class TestValidation:
    def test_turbocore_is_clean(self) -> None:
        config = create_turbocore_config(clock=_clock())
        result = validate_themeconfig(config, clock=_clock(), product_name="TurboCore")
        assert result.is_valid
        assert result.warnings == []

    def test_stale_footer_year_warns(self) -> None:
        config = create_turbocore_config(clock=_clock(2024))
        result = validate_themeconfig(config, clock=_clock(2025))
        assert result.is_valid
        assert any("current year 2025" in w for w in result.warnings)

    def test_plain_http_warns(self) -> None:
        config = create_turbocore_config(clock=_clock()).model_copy(
            update={"project_link": "http://blog.samiyousef.ca"}
        )
        result = validate_themeconfig(config, clock=_clock())
        assert any("plain http" in w for w in result.warnings)

    def test_brand_missing_from_title_warns(self) -> None:
        config = create_turbocore_config(clock=_clock()).model_copy(
            update={
                "seo_metadata_provider": ConstantSeoProvider(
                    title_template="%s", description="API documentation for TurboCore"
                )
            }
        )
        result = validate_themeconfig(config, clock=_clock(), product_name="TurboCore")
        assert any("title_template" in w for w in result.warnings)

    def test_failing_provider_is_an_error(self) -> None:
        def broken(page=None):
            raise RuntimeError("boom")

        config = create_turbocore_config(clock=_clock()).model_copy(
            update={"seo_metadata_provider": broken}
        )
        result = validate_themeconfig(config, clock=_clock())
        assert not result.is_valid
        assert "boom" in result.errors[0]
