"""
Pure-Python OKLCH palette generation.

Derives the documentation site's color palette from the primary hue using the
OKLCH color space. No external color libraries required.
"""

from __future__ import annotations

PALETTE_MODES: tuple[str, ...] = ("light", "dark")


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness (0-1).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1).

    Returns:
        CSS oklch() string.
    """
    L_fmt = f"{L:.3f}"
    C_fmt = f"{C:.4f}"
    H_fmt = f"{H:.1f}"
    if alpha < 1.0:
        return f"oklch({L_fmt} {C_fmt} {H_fmt} / {alpha:.2f})"
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"


# Curated lightness stops for a 10-step scale (50 through 950).
_LIGHTNESS_STOPS: tuple[float, ...] = (
    0.97,  # 50
    0.93,  # 100
    0.87,  # 200
    0.78,  # 300
    0.67,  # 400
    0.55,  # 500
    0.45,  # 600
    0.35,  # 700
    0.25,  # 800
    0.15,  # 950
)

_STEP_NAMES: tuple[str, ...] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "950")

# Callout hues are fixed so warnings stay recognisable under any brand hue
_CALLOUT_HUES: dict[str, float] = {
    "info": 240.0,
    "warning": 85.0,
    "error": 25.0,
}


def _generate_scale(hue: float, chroma: float, *, invert: bool = False) -> dict[str, str]:
    """Generate a 10-step color scale for one hue.

    Args:
        hue: OKLCH hue.
        chroma: OKLCH chroma.
        invert: If True, invert lightness for dark mode.

    Returns:
        Dict mapping step names to CSS oklch() values.
    """
    stops = list(reversed(_LIGHTNESS_STOPS)) if invert else list(_LIGHTNESS_STOPS)

    scale: dict[str, str] = {}
    for name, lightness in zip(_STEP_NAMES, stops, strict=True):
        # Reduce chroma at extremes for perceptual balance
        adj_chroma = chroma
        if lightness > 0.9 or lightness < 0.2:
            adj_chroma = chroma * 0.5
        elif lightness > 0.8 or lightness < 0.3:
            adj_chroma = chroma * 0.75
        scale[name] = oklch_to_css(lightness, adj_chroma, hue)
    return scale


def generate_palette(
    primary_hue: float,
    chroma: float = 0.15,
    mode: str = "light",
    *,
    neutral_chroma: float = 0.02,
) -> dict[str, str]:
    """Generate the documentation site palette.

    Args:
        primary_hue: Primary hue in degrees (0-360).
        chroma: Primary chroma (0-0.4).
        mode: Color mode ("light" or "dark").
        neutral_chroma: Chroma for neutral tones.

    Returns:
        Flat dict of token names to CSS oklch() values.

    Raises:
        ValueError: If mode is not a known palette mode.
    """
    if mode not in PALETTE_MODES:
        raise ValueError(f"Unknown palette mode {mode!r}; expected one of {PALETTE_MODES}")
    dark = mode == "dark"
    hue = primary_hue % 360

    palette: dict[str, str] = {}
    for name, value in _generate_scale(hue, chroma, invert=dark).items():
        palette[f"primary-{name}"] = value
    for name, value in _generate_scale(hue, neutral_chroma, invert=dark).items():
        palette[f"neutral-{name}"] = value

    # Links and selection follow the primary hue
    if dark:
        palette["link"] = oklch_to_css(0.75, chroma, hue)
        palette["link-hover"] = oklch_to_css(0.85, chroma * 0.8, hue)
        palette["selection"] = oklch_to_css(0.45, chroma, hue, alpha=0.4)
    else:
        palette["link"] = oklch_to_css(0.50, chroma, hue)
        palette["link-hover"] = oklch_to_css(0.40, chroma, hue)
        palette["selection"] = oklch_to_css(0.87, chroma, hue, alpha=0.4)

    # Callouts: background, border and text per kind
    callout_chroma = min(chroma * 1.2, 0.2)
    for kind, callout_hue in _CALLOUT_HUES.items():
        scale = _generate_scale(callout_hue, callout_chroma, invert=dark)
        palette[f"callout-{kind}-bg"] = scale["100"]
        palette[f"callout-{kind}-border"] = scale["300"]
        palette[f"callout-{kind}-text"] = scale["800"]

    # Surfaces
    if dark:
        palette["bg-primary"] = oklch_to_css(0.13, neutral_chroma * 0.5, hue)
        palette["bg-secondary"] = oklch_to_css(0.17, neutral_chroma * 0.5, hue)
        palette["code-bg"] = oklch_to_css(0.21, neutral_chroma, hue)
        palette["text-primary"] = oklch_to_css(0.93, 0.0, 0.0)
        palette["text-muted"] = oklch_to_css(0.65, 0.0, 0.0)
        palette["border-default"] = oklch_to_css(0.30, neutral_chroma * 0.5, hue)
    else:
        palette["bg-primary"] = oklch_to_css(0.99, neutral_chroma * 0.3, hue)
        palette["bg-secondary"] = oklch_to_css(0.96, neutral_chroma * 0.3, hue)
        palette["code-bg"] = oklch_to_css(0.94, neutral_chroma, hue)
        palette["text-primary"] = oklch_to_css(0.15, 0.0, 0.0)
        palette["text-muted"] = oklch_to_css(0.50, 0.0, 0.0)
        palette["border-default"] = oklch_to_css(0.85, neutral_chroma * 0.5, hue)

    return palette


def palette_to_css(palette: dict[str, str], *, selector: str = ":root") -> str:
    """Render palette tokens as CSS custom properties.

    Args:
        palette: Token dict from generate_palette().
        selector: CSS selector wrapping the declarations.

    Returns:
        CSS block text.
    """
    lines = [f"{selector} {{"]
    for name, value in palette.items():
        lines.append(f"  --docs-{name}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"
