"""
TurboCore documentation theme.

The configuration handed to the documentation site renderer. Build it once
at generation start and pass it to the renderer; every call returns a new
instance, so tests can build as many as they need with fixed clocks.
"""

from __future__ import annotations

from pathlib import Path

from .core.ir.themeconfig import ThemeConfiguration
from .core.themeconfig import Clock
from .core.themeconfig_loader import build_from_document, create_default_document, load_themeconfig


def create_turbocore_config(clock: Clock | None = None) -> ThemeConfiguration:
    """Build the TurboCore theme configuration.

    Args:
        clock: Returns the current time; the footer shows its year.
            Defaults to the system clock.
    """
    return build_from_document(create_default_document(), clock=clock)


def load_config(project_root: Path | None = None, clock: Clock | None = None) -> ThemeConfiguration:
    """Build the configuration for a docs project.

    Reads ``themeconfig.yaml`` from ``project_root`` when it exists and falls
    back to the TurboCore theme otherwise.
    """
    if project_root is None:
        return create_turbocore_config(clock)
    return load_themeconfig(project_root, clock=clock)
