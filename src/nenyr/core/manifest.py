import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .cursor import DEFAULT_TRACE_SIZE
from .errors import NenyrError

MANIFEST_NAME = "nenyr.toml"


@dataclass
class ParserConfig:
    """Parser settings."""

    trace_size: int = DEFAULT_TRACE_SIZE  # Tokens kept in diagnostic traces
    max_nesting_depth: int | None = None  # None means unlimited


@dataclass
class ProjectManifest:
    name: str
    version: str = "0.1.0"
    source_paths: list[str] = field(default_factory=lambda: ["."])
    parser: ParserConfig = field(default_factory=ParserConfig)


def _is_positive_int(value: object) -> bool:
    # TOML booleans are ints to isinstance
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise NenyrError(f"Could not read manifest {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise NenyrError(f"Invalid manifest {path}: {e}") from e

    project = data.get("project", {})
    sources = data.get("sources", {})
    parser_data = data.get("parser", {})

    trace_size = parser_data.get("trace_size", DEFAULT_TRACE_SIZE)
    if not _is_positive_int(trace_size):
        raise NenyrError(f"Invalid manifest {path}: parser.trace_size must be a positive integer")

    max_nesting_depth = parser_data.get("max_nesting_depth")
    if max_nesting_depth is not None and not _is_positive_int(max_nesting_depth):
        raise NenyrError(
            f"Invalid manifest {path}: parser.max_nesting_depth must be a positive integer"
        )

    return ProjectManifest(
        name=project.get("name", path.parent.name),
        version=project.get("version", "0.1.0"),
        source_paths=sources.get("paths", ["."]),
        parser=ParserConfig(trace_size=trace_size, max_nesting_depth=max_nesting_depth),
    )
