"""Logic for caching parsed modules and their export summaries."""

import logging
from pathlib import Path

from jsdoc_typeref.analyze_exports import analyze_exports
from jsdoc_typeref.ast_builder import AstBuilder
from jsdoc_typeref.ast_nodes import File
from jsdoc_typeref.exceptions import UnresolvableModuleError
from jsdoc_typeref.export_summary import ExportSummary
from jsdoc_typeref.module_path import module_file

logger = logging.getLogger(__name__)


class ModuleCache:
    """Memoizes syntax trees and export summaries by module id for one run.

    Entries are never invalidated; a documentation run is a single pass.
    """

    def __init__(self, root: Path, builder: AstBuilder, extension: str = ".js") -> None:
        """Initialize an empty cache for modules under ``root``."""
        self.root = root
        self.builder = builder
        self.extension = extension
        self.file_nodes: dict[str, File] = {}
        self.summaries: dict[str, ExportSummary] = {}

    def register_file(self, module_id: str, file: File) -> None:
        """Remember a tree the host already parsed so it is never read again."""
        self.file_nodes[module_id] = file

    def get_file(self, module_id: str) -> File:
        """Return the tree for a module, parsing its source on first use."""
        file = self.file_nodes.get(module_id)
        if file is not None:
            logger.debug("Cache hit for module %s", module_id)
            return file
        path = module_file(self.root, module_id, self.extension)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise UnresolvableModuleError(module_id, path) from e
        logger.debug("Parsing %s on demand for module %s", path, module_id)
        file = self.builder.build(source, str(path))
        self.file_nodes[module_id] = file
        return file

    def get_module_info(self, module_id: str) -> ExportSummary:
        """Return the export summary of a module, computing it once."""
        summary = self.summaries.get(module_id)
        if summary is not None:
            logger.debug("Cache hit for exports of %s", module_id)
            return summary
        file = self.get_file(module_id)
        summary = analyze_exports(file.program.body)
        self.summaries[module_id] = summary
        logger.debug(
            "Module %s: default=%s named=%s",
            module_id,
            summary.default_export,
            sorted(summary.named_exports),
        )
        return summary

    def default_export_name(self, module_id: str) -> str | None:
        """Return the name of the class a module exports as default, if any."""
        return self.get_module_info(module_id).default_export

    def delimiter(self, module_id: str, symbol: str | None) -> str:
        """Return the path delimiter for ``symbol`` exported from ``module_id``."""
        return self.get_module_info(module_id).delimiter_for(symbol)
