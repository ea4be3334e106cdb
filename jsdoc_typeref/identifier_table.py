"""Logic for building the table of identifiers declared or imported by a file."""

from collections.abc import Callable, Iterable
from pathlib import Path

from jsdoc_typeref.ast_nodes import ClassDeclaration, ImportDeclaration, Node
from jsdoc_typeref.local_identifier import LocalIdentifier
from jsdoc_typeref.module_path import is_relative

IdentifierTable = dict[str, LocalIdentifier]
SubclassHook = Callable[[ClassDeclaration, IdentifierTable], None]


def build_identifier_table(
    body: Iterable[Node],
    source_name: str | Path,
    on_subclass: SubclassHook | None = None,
) -> IdentifierTable:
    """Collect imports and local classes in statement order.

    ``on_subclass`` is called for each class with a superclass, with the table
    as it stands at that point.
    """
    table: IdentifierTable = {}
    own_file = Path(source_name).name
    for statement in body:
        node = statement
        if node.type == "ExportNamedDeclaration" and node.declaration is not None:
            node = node.declaration
        if node.type == "ImportDeclaration":
            _add_import(table, node)
        elif node.type == "ClassDeclaration":
            if node.id is not None and node.id.name:
                table[node.id.name] = LocalIdentifier(own_file)
            if node.super_class is not None and on_subclass is not None:
                on_subclass(node, table)
    return table


def add_typedef(table: IdentifierTable, name: str, source_name: str | Path) -> None:
    """Register a `@typedef` as if it were a class declared in the file."""
    table[name] = LocalIdentifier(Path(source_name).name)


def _add_import(table: IdentifierTable, node: ImportDeclaration) -> None:
    """Add default and named import bindings; namespace imports are skipped."""
    source = str(node.source.value)
    external = not is_relative(source)
    for specifier in node.specifiers:
        if specifier.type == "ImportDefaultSpecifier":
            table[specifier.local.name] = LocalIdentifier(
                source, default_import=True, external=external
            )
        elif specifier.type == "ImportSpecifier":
            imported = specifier.imported.name if specifier.imported else None
            table[specifier.local.name] = LocalIdentifier(
                source,
                imported=imported if imported != specifier.local.name else None,
                external=external,
            )
