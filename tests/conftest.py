"""Shared pytest fixtures for Nenyr tests."""

from pathlib import Path

import pytest

from nenyr.core.dsl_parser_impl import Parser

CENTRAL_DOCUMENT = """\
Construct Central {
    Imports({
        Import('https://fonts.googleapis.com/css2?family=Roboto'),
        Import('./styles/reset.css'),
    }),
    Typefaces({ roseMartin: "./typefaces/rosemartin.regular.otf" }),
    Breakpoints({
        MobileFirst({ onMobile: "360px", onTablet: "720px" }),
        DesktopFirst({ onDesktop: "1024px" })
    }),
    Aliases({ bgd: "background" }),
    Variables({ primaryColor: "#FF6677" }),
    Themes({
        Light({ Variables({ primaryColor: "#FFFFFF" }) }),
        Dark({ Variables({ primaryColor: "#000000" }) })
    }),
    Animation('fadeIn') {
        Progressive({ opacity: "0" }),
        Progressive({ opacity: "1" })
    },
    Class('button') Deriving('base') {
        Important(true),
        Stylesheet({ backgroundColor: "blue", padding: "10px" }),
        Hover({ backgroundColor: "navy" }),
        PanoramicViewer({
            onMobile({ Stylesheet({ padding: "4px" }) })
        })
    }
}
"""

LAYOUT_DOCUMENT = """\
Construct Layout('dashboard') {
    Variables({ gutter: "16px" }),
    Class('card') {
        Stylesheet({ padding: "8px" })
    }
}
"""


@pytest.fixture
def make_parser():
    """Return a factory building a parser over a snippet."""

    def _make(text: str, **kwargs) -> Parser:
        return Parser(text, "test.nyr", **kwargs)

    return _make


@pytest.fixture
def central_document() -> str:
    return CENTRAL_DOCUMENT


@pytest.fixture
def layout_document() -> str:
    return LAYOUT_DOCUMENT


@pytest.fixture
def nenyr_project(tmp_path: Path) -> Path:
    """Create a temporary project with a manifest and two documents."""
    styles = tmp_path / "styles"
    styles.mkdir()
    (styles / "central.nyr").write_text(CENTRAL_DOCUMENT)
    (styles / "dashboard.nyr").write_text(LAYOUT_DOCUMENT)

    (tmp_path / "nenyr.toml").write_text(
        """
[project]
name = "storefront"
version = "0.2.0"

[sources]
paths = ["styles/"]

[parser]
trace_size = 4
"""
    )
    return tmp_path
