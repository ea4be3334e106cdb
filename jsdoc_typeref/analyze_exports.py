"""Logic for summarising the exports of a module."""

from collections.abc import Iterable

from jsdoc_typeref.ast_nodes import ClassDeclaration, Node
from jsdoc_typeref.export_summary import ExportSummary


def analyze_exports(body: Iterable[Node]) -> ExportSummary:
    """Scan top-level statements once and collect exported class names.

    Only classes declared before the export statement that names them are
    seen: `export default Foo;` must follow `class Foo {}`.
    """
    summary = ExportSummary()
    classes: dict[str, ClassDeclaration] = {}
    for node in body:
        if node.type == "ClassDeclaration":
            if node.id is not None:
                classes[node.id.name] = node
        elif node.type == "ExportDefaultDeclaration":
            declaration = node.declaration
            if declaration.type == "Identifier" and declaration.name in classes:
                summary.default_export = classes[declaration.name].id.name
        elif node.type == "ExportNamedDeclaration":
            declaration = node.declaration
            if (
                declaration is not None
                and declaration.type == "ClassDeclaration"
                and declaration.id is not None
            ):
                summary.named_exports.add(declaration.id.name)
    return summary
