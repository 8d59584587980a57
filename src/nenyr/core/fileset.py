from pathlib import Path

from .manifest import ProjectManifest


def discover_nenyr_files(root: Path, manifest: ProjectManifest) -> list[Path]:
    files: list[Path] = []
    for rel in manifest.source_paths:
        base = (root / rel).resolve()
        if not base.exists():
            continue
        if base.is_file():
            files.append(base)
            continue
        for p in base.rglob("*.nyr"):
            files.append(p)
    return sorted(set(files))
