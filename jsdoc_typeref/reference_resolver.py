"""Logic for turning type references into `module:` paths."""

from pathlib import Path

from jsdoc_typeref.local_identifier import LocalIdentifier
from jsdoc_typeref.module_cache import ModuleCache
from jsdoc_typeref.module_path import is_relative, module_id_for, resolve_import_path


def format_module_path(module_id: str, export_name: str | None, delimiter: str) -> str:
    """Render `module:<id>` with an optional `<delimiter><export>` suffix."""
    return f"module:{module_id}{delimiter + export_name if export_name else ''}"


def external_module_path(package: str, export_name: str | None) -> str:
    """Render a reference into a package outside the module root."""
    if not export_name or export_name == "default":
        return f"module:{package}"
    return f"module:{package}~{export_name}"


class ReferenceResolver:
    """Resolves references made from one source file."""

    def __init__(self, cache: ModuleCache, source_name: str | Path) -> None:
        """Bind the resolver to the cache and the file being rewritten."""
        self.cache = cache
        self.source_name = Path(source_name)

    def module_id(self, import_path: str) -> str:
        """Return the module id an import path points at from this file."""
        absolute = resolve_import_path(self.source_name, import_path)
        return module_id_for(absolute, self.cache.root, self.cache.extension)

    def resolve_import(self, import_path: str, export_name: str) -> str:
        """Resolve `import("<import_path>").<export_name>`."""
        if not is_relative(import_path):
            return external_module_path(import_path, export_name)
        module_id = self.module_id(import_path)
        if export_name == "default":
            return format_module_path(
                module_id, self.cache.default_export_name(module_id), "~"
            )
        return format_module_path(
            module_id, export_name, self.cache.delimiter(module_id, export_name)
        )

    def resolve_identifier(self, name: str, identifier: LocalIdentifier) -> str:
        """Resolve a bare identifier found in this file's identifier table."""
        if identifier.external:
            export_name = "default" if identifier.default_import else identifier.imported
            return external_module_path(identifier.source, export_name or name)
        module_id = self.module_id(identifier.source)
        if identifier.default_import:
            return format_module_path(
                module_id, self.cache.default_export_name(module_id), "~"
            )
        export_name = identifier.imported or name
        return format_module_path(
            module_id, export_name, self.cache.delimiter(module_id, export_name)
        )
