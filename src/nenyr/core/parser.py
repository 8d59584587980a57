import logging
from dataclasses import dataclass
from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_nenyr
from .errors import NenyrError
from .manifest import ParserConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedDocument:
    path: Path
    context: ir.NenyrContext


def parse_file(path: Path, config: ParserConfig | None = None) -> ParsedDocument:
    """
    Read and parse a single Nenyr file.

    Raises:
        NenyrError: If the file cannot be read or parsed
    """
    config = config or ParserConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise NenyrError(f"Could not read {path}: {e}") from e

    logger.debug("Parsing %s", path)
    context = parse_nenyr(
        text,
        path,
        trace_size=config.trace_size,
        max_nesting_depth=config.max_nesting_depth,
    )
    logger.debug("Parsed %s context %r from %s", context.kind.value, context.name, path)
    return ParsedDocument(path=path, context=context)


def parse_files(files: list[Path], config: ParserConfig | None = None) -> list[ParsedDocument]:
    """
    Parse Nenyr files in order, stopping at the first diagnostic.

    Args:
        files: List of .nyr file paths
        config: Parser settings (defaults when omitted)

    Returns:
        One ParsedDocument per file
    """
    documents = [parse_file(f, config) for f in files]
    logger.info("Parsed %d Nenyr document(s)", len(documents))
    return documents
