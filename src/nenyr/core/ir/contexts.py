"""
Context types for Nenyr IR.

A document declares exactly one context: ``Central``, ``Layout`` or
``Module``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .styles import Animation, Breakpoints, PropertyMap, StyleClass, Themes


class ContextKind(str, Enum):
    CENTRAL = "central"
    LAYOUT = "layout"
    MODULE = "module"


class CentralContext(BaseModel):
    """
    The project-wide context.

    Attributes:
        imports: External stylesheets (URLs or paths)
        typefaces: Typeface name -> font file
        breakpoints: Responsive breakpoints
        aliases: Alias -> property name
        variables: Variable name -> value
        themes: Light/dark variable overrides
        animations: Animations by name
        classes: Style classes by name
    """

    kind: ContextKind = ContextKind.CENTRAL
    imports: list[str] = Field(default_factory=list)
    typefaces: PropertyMap = Field(default_factory=dict)
    breakpoints: Breakpoints | None = None
    aliases: PropertyMap = Field(default_factory=dict)
    variables: PropertyMap = Field(default_factory=dict)
    themes: Themes | None = None
    animations: dict[str, Animation] = Field(default_factory=dict)
    classes: dict[str, StyleClass] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return "Central"


class LayoutContext(BaseModel):
    """A named layout shared by several modules."""

    kind: ContextKind = ContextKind.LAYOUT
    layout_name: str
    aliases: PropertyMap = Field(default_factory=dict)
    variables: PropertyMap = Field(default_factory=dict)
    themes: Themes | None = None
    animations: dict[str, Animation] = Field(default_factory=dict)
    classes: dict[str, StyleClass] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.layout_name


class ModuleContext(BaseModel):
    """A named module, optionally extending a layout."""

    kind: ContextKind = ContextKind.MODULE
    module_name: str
    extending_from: str | None = None
    aliases: PropertyMap = Field(default_factory=dict)
    variables: PropertyMap = Field(default_factory=dict)
    animations: dict[str, Animation] = Field(default_factory=dict)
    classes: dict[str, StyleClass] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.module_name


NenyrContext = CentralContext | LayoutContext | ModuleContext
