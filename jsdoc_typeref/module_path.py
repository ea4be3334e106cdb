"""Helpers for turning source paths into module identifiers."""

import os
from pathlib import Path, PurePosixPath


def is_relative(import_path: str) -> bool:
    """Return True for `./x` and `../x` style import paths."""
    return import_path.startswith(".")


def resolve_import_path(current_source: str | Path, import_path: str) -> Path:
    """Resolve an import path against the directory of the importing file."""
    base = Path(current_source).parent
    return Path(os.path.normpath(base / import_path))


def module_id_for(absolute_path: str | Path, root: str | Path, extension: str) -> str:
    """Express a file path as a root-relative, extension-less module id."""
    rel = PurePosixPath(Path(os.path.relpath(absolute_path, root)).as_posix())
    text = str(rel)
    if extension and text.endswith(extension):
        text = text[: -len(extension)]
    return text


def module_file(root: str | Path, module_id: str, extension: str) -> Path:
    """Return the source file a module id points at."""
    return Path(root) / f"{module_id}{extension}"
