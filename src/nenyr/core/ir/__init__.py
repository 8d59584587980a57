"""
Nenyr Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .contexts import (
    CentralContext,
    ContextKind,
    LayoutContext,
    ModuleContext,
    NenyrContext,
)
from .styles import (
    Animation,
    AnimationKind,
    Breakpoints,
    Keyframe,
    PropertyMap,
    StyleClass,
    Themes,
)

__all__ = [
    # Contexts
    "CentralContext",
    "ContextKind",
    "LayoutContext",
    "ModuleContext",
    "NenyrContext",
    # Styles
    "Animation",
    "AnimationKind",
    "Breakpoints",
    "Keyframe",
    "PropertyMap",
    "StyleClass",
    "Themes",
]
