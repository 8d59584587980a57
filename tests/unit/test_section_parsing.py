"""Tests for imports, typefaces, breakpoints, aliases, variables and themes."""

import pytest

from nenyr import parse_nenyr
from nenyr.core.delimiters import DelimiterKind
from nenyr.core.errors import ErrorRule, ParseError, ValidationError


def parse_central(body: str):
    return parse_nenyr(f"Construct Central {{ {body} }}", "central.nyr")


class TestImports:
    def test_imports(self):
        context = parse_central(
            "Imports({ Import('../shared/base.css'), Import('ftp://files.example.com/a.css') })"
        )

        assert context.imports == ["../shared/base.css", "ftp://files.example.com/a.css"]

    def test_invalid_import(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_central("Imports({ Import('reset.css') })")

        error = exc_info.value
        assert error.rule == ErrorRule.INVALID_IMPORT
        assert error.context_name == "Central"
        assert error.context.column == 38

    def test_entry_must_be_import(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central("Imports({ './a.css' })")

        assert "Expected `Import`" in exc_info.value.message

    def test_import_needs_string(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central("Imports({ Import(reset) })")

        assert "quoted URL or path" in exc_info.value.message


class TestTypefaces:
    def test_invalid_typeface(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_central('Typefaces({ body: "./fonts/body.png" })')

        error = exc_info.value
        assert error.rule == ErrorRule.INVALID_TYPEFACE
        assert "`body`" in error.message

    def test_several_typefaces(self):
        context = parse_central(
            'Typefaces({ body: "./fonts/body.woff2", title: "/fonts/Title.TTF" })'
        )

        assert list(context.typefaces) == ["body", "title"]


class TestBreakpoints:
    def test_mobile_only(self):
        context = parse_central('Breakpoints({ MobileFirst({ onMobile: "360px" }) })')

        assert context.breakpoints.mobile_first == {"onMobile": "360px"}
        assert context.breakpoints.desktop_first is None
        assert context.breakpoints.names() == ["onMobile"]

    def test_unknown_schema(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central('Breakpoints({ TabletFirst({ onTablet: "720px" }) })')

        assert "`MobileFirst` or `DesktopFirst`" in exc_info.value.message

    def test_missing_outer_paren(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central('Breakpoints{ MobileFirst({ onMobile: "360px" }) }')

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_OPEN_DELIMITER
        assert error.delimiter == DelimiterKind.PARENTHESIS
        assert "Breakpoints({" in error.suggestion


class TestAliasesAndVariables:
    def test_keyword_keys_are_allowed(self):
        """Test that reserved words may be used as property names."""
        context = parse_central('Variables({ Light: "#fff" })')

        assert context.variables == {"Light": "#fff"}

    def test_missing_curly(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central('Aliases( bgd: "background" )')

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_OPEN_DELIMITER
        assert error.delimiter == DelimiterKind.CURLY_BRACKET
        assert "`Aliases`" in error.message


class TestThemes:
    def test_light_only(self):
        context = parse_central('Themes({ Light({ Variables({ bg: "#fff" }), }) })')

        assert context.themes.light == {"bg": "#fff"}
        assert context.themes.dark is None

    def test_empty_scheme(self):
        context = parse_central("Themes({ Dark({ }) })")

        assert context.themes.dark == {}

    def test_unknown_scheme(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central("Themes({ Sepia({ }) })")

        assert "`Light` or `Dark`" in exc_info.value.message

    def test_scheme_holds_only_variables(self):
        with pytest.raises(ParseError) as exc_info:
            parse_central('Themes({ Light({ Aliases({ a: "b" }) }) })')

        error = exc_info.value
        assert error.rule == ErrorRule.MISSING_CLOSE_DELIMITER
        assert "`Light` theme" in error.message
