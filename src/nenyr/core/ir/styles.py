"""
Style types for Nenyr IR.

Style classes, animations, themes and breakpoints. Mappings keep the
order in which they were written in the document.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# property name -> raw value
PropertyMap = dict[str, str]


class StyleClass(BaseModel):
    """
    A style class declared with ``Class('name') { ... }``.

    Attributes:
        name: Class identifier
        deriving_from: Class named in ``Deriving('...')``, if any
        is_important: Value of ``Important(...)``, if declared
        style_patterns: Pattern name (``Stylesheet``, ``Hover``, ...) -> properties
        responsive_patterns: Breakpoint -> pattern name -> properties
    """

    name: str
    deriving_from: str | None = None
    is_important: bool | None = None
    style_patterns: dict[str, PropertyMap] = Field(default_factory=dict)
    responsive_patterns: dict[str, dict[str, PropertyMap]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class AnimationKind(str, Enum):
    """How keyframe positions are expressed."""

    NONE = "none"
    FRACTION = "fraction"
    PROGRESSIVE = "progressive"


class Keyframe(BaseModel):
    """
    One keyframe block.

    ``stops`` holds the percentages given to ``Fraction``; it is empty for
    ``Progressive`` keyframes, whose positions are spread evenly.
    """

    stops: list[float] = Field(default_factory=list)
    properties: PropertyMap = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Animation(BaseModel):
    """An ``Animation('name') { ... }`` block."""

    name: str
    kind: AnimationKind = AnimationKind.NONE
    keyframes: list[Keyframe] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Themes(BaseModel):
    """Variables overridden per color scheme."""

    light: PropertyMap | None = None
    dark: PropertyMap | None = None

    model_config = ConfigDict(frozen=True)


class Breakpoints(BaseModel):
    """Named breakpoints for mobile-first and desktop-first layouts."""

    mobile_first: PropertyMap | None = None
    desktop_first: PropertyMap | None = None

    model_config = ConfigDict(frozen=True)

    def names(self) -> list[str]:
        return [*(self.mobile_first or {}), *(self.desktop_first or {})]
