"""Orchestration of type-reference resolution for one documentation run."""

import logging
from pathlib import Path
from typing import Any

from jsdoc_typeref.ast_builder import AstBuilder
from jsdoc_typeref.ast_nodes import ClassDeclaration, File
from jsdoc_typeref.file_rewrite import FileRewrite
from jsdoc_typeref.identifier_table import IdentifierTable, build_identifier_table
from jsdoc_typeref.inject_extends import inject_extends
from jsdoc_typeref.load_config import module_root
from jsdoc_typeref.module_cache import ModuleCache
from jsdoc_typeref.module_path import module_id_for
from jsdoc_typeref.reference_resolver import ReferenceResolver
from jsdoc_typeref.rewrite_comment import rewrite_comment

logger = logging.getLogger(__name__)


class ResolutionSession:
    """Owns the module cache and rewrites files one at a time.

    Create one session per documentation run and hand it every file the host
    parses; cross-module lookups parse unseen modules on demand.
    """

    def __init__(self, root: Path, builder: AstBuilder, extension: str = ".js") -> None:
        """Initialize the session for modules under the absolute ``root``."""
        self.cache = ModuleCache(root, builder, extension)

    @classmethod
    def from_config(
        cls, config: dict[str, Any], builder: AstBuilder, cwd: Path | None = None
    ) -> "ResolutionSession":
        """Validate the configuration and create a session from it."""
        root = module_root(config, cwd)
        extension = config["typescript"].get("extension") or ".js"
        return cls(root, builder, extension)

    @property
    def root(self) -> Path:
        """Return the absolute module root."""
        return self.cache.root

    def module_id(self, source_name: str | Path) -> str:
        """Return the module id of a source file."""
        return module_id_for(source_name, self.cache.root, self.cache.extension)

    def rewrite_file(self, file: File, source_name: str | Path) -> FileRewrite:
        """Compute rewritten comment text for ``file`` without touching its nodes."""
        module_id = self.module_id(source_name)
        self.cache.register_file(module_id, file)
        resolver = ReferenceResolver(self.cache, source_name)
        result = FileRewrite.for_comments(module_id, file.comments)

        def on_subclass(node: ClassDeclaration, table: IdentifierTable) -> None:
            if not node.leading_comments:
                return
            slot = result.index_of(node.leading_comments[-1])
            name = node.super_class.name
            identifier = table.get(name)
            target = (
                resolver.resolve_identifier(name, identifier) if identifier else name
            )
            result.values[slot] = inject_extends(result.values[slot], target)

        table = build_identifier_table(file.program.body, source_name, on_subclass)
        for i, value in enumerate(result.values):
            result.values[i] = rewrite_comment(value, table, resolver)
        logger.debug(
            "Rewrote %s: %d identifiers, %d comments",
            module_id,
            len(table),
            len(result.values),
        )
        return result

    def visit_node(self, node: object, source_name: str | Path) -> FileRewrite | None:
        """Host visitor hook: rewrite and apply when ``node`` is a whole file."""
        if not isinstance(node, File):
            return None
        result = self.rewrite_file(node, source_name)
        result.apply()
        return result
