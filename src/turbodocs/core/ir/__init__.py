"""
TurboDocs Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .markup import (
    MarkupFragment,
    MarkupKind,
    coerce_fragment,
    element,
    text,
)
from .themeconfig import (
    HUE_MAX_EXCLUSIVE,
    HUE_MIN,
    TITLE_PLACEHOLDER,
    ConstantSeoProvider,
    FooterSpec,
    SeoMetadata,
    ThemeConfigDocument,
    ThemeConfiguration,
)

__all__ = [
    # Markup
    "MarkupFragment",
    "MarkupKind",
    "coerce_fragment",
    "element",
    "text",
    # Theme configuration
    "HUE_MIN",
    "HUE_MAX_EXCLUSIVE",
    "TITLE_PLACEHOLDER",
    "ConstantSeoProvider",
    "FooterSpec",
    "SeoMetadata",
    "ThemeConfigDocument",
    "ThemeConfiguration",
]
