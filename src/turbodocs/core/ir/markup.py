"""
Markup fragment types for TurboDocs IR.

Logo and footer content are carried as structured fragments rather than
markup strings. A fragment is either plain text or an element with a tag,
attributes and child fragments. The configuration passes fragments through
unmodified; rendering to HTML is provided for previews and exports.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_TAG_RE = re.compile(r"^[a-z][a-z0-9-]*$")
_ATTR_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_.:-]*$")

# Elements rendered without a closing tag
_VOID_TAGS = frozenset({"br", "hr", "img", "wbr"})


class MarkupKind(StrEnum):
    """Fragment variants."""

    TEXT = "text"
    ELEMENT = "element"


class MarkupFragment(BaseModel):
    """
    Opaque renderable content.

    Attributes:
        kind: Either 'text' or 'element'
        text: Literal text when kind is 'text'
        tag: Lowercase tag name when kind is 'element'
        attributes: Element attributes as (name, value) pairs sorted by name
        children: Child fragments of an element
    """

    kind: MarkupKind
    text: str | None = None
    tag: str | None = None
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[MarkupFragment, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return tuple(sorted(v.items()))
        return v

    @model_validator(mode="after")
    def check_variant(self) -> MarkupFragment:
        if self.kind == MarkupKind.TEXT:
            if self.text is None:
                raise ValueError("text fragment requires 'text'")
            if self.tag is not None or self.children or self.attributes:
                raise ValueError("text fragment cannot have tag, attributes or children")
        else:
            if not self.tag or not _TAG_RE.match(self.tag):
                raise ValueError(f"element fragment requires a lowercase tag name, got {self.tag!r}")
            if self.text is not None:
                raise ValueError("element fragment carries text through children, not 'text'")
            names = [name for name, _ in self.attributes]
            if len(set(names)) != len(names):
                raise ValueError("duplicate attribute names")
            for name in names:
                if not _ATTR_RE.match(name):
                    raise ValueError(f"invalid attribute name {name!r}")
        return self

    def text_content(self) -> str:
        """Concatenated text of this fragment and all descendants."""
        if self.kind == MarkupKind.TEXT:
            return self.text or ""
        return "".join(child.text_content() for child in self.children)

    def is_empty(self) -> bool:
        """True when the fragment would display no visible text."""
        return not self.text_content().strip()

    def render_html(self) -> Markup:
        """Render the fragment as escaped HTML."""
        if self.kind == MarkupKind.TEXT:
            return escape(self.text or "")
        attrs = "".join(
            Markup(' {}="{}"').format(Markup(name), value)
            for name, value in sorted(self.attributes)
        )
        if self.tag in _VOID_TAGS:
            return Markup("<{}{}>").format(Markup(self.tag), Markup(attrs))
        inner = Markup("").join(child.render_html() for child in self.children)
        return Markup("<{tag}{attrs}>{inner}</{tag}>").format(
            tag=Markup(self.tag), attrs=Markup(attrs), inner=inner
        )

    def to_data(self) -> dict[str, Any]:
        """Compact tagged-dict form used by exports."""
        if self.kind == MarkupKind.TEXT:
            return {"kind": "text", "text": self.text}
        data: dict[str, Any] = {"kind": "element", "tag": self.tag}
        if self.attributes:
            data["attributes"] = dict(self.attributes)
        data["children"] = [child.to_data() for child in self.children]
        return data


def text(value: str) -> MarkupFragment:
    """Create a plain-text fragment."""
    return MarkupFragment(kind=MarkupKind.TEXT, text=value)


def element(
    tag: str,
    *children: MarkupFragment | str,
    attributes: Mapping[str, str] | None = None,
) -> MarkupFragment:
    """Create an element fragment; string children become text fragments."""
    return MarkupFragment(
        kind=MarkupKind.ELEMENT,
        tag=tag,
        attributes=attributes or (),
        children=tuple(text(child) if isinstance(child, str) else child for child in children),
    )


def coerce_fragment(value: Any) -> MarkupFragment:
    """Accept a fragment, a plain string, or a tagged dict."""
    if isinstance(value, MarkupFragment):
        return value
    if isinstance(value, str):
        return text(value)
    return MarkupFragment.model_validate(value)
