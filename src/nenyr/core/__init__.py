"""Nenyr core: lexer, token cursor, diagnostics, parser and IR."""
