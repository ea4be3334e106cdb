"""Logic for rewriting the type references of one documentation comment."""

from jsdoc_typeref.identifier_table import IdentifierTable, add_typedef
from jsdoc_typeref.reference_resolver import ReferenceResolver
from jsdoc_typeref.reference_scanner import (
    TypeReference,
    find_typedef,
    scan_imports,
    scan_locals,
    strip_typeof,
    substitute,
)


def rewrite_comment(
    text: str,
    table: IdentifierTable,
    resolver: ReferenceResolver,
) -> str:
    """Rewrite `import("...")` and local type references to `module:` paths.

    A `@typedef` found in the comment is added to ``table`` before local
    references are resolved, so later comments can refer to it as well.
    """
    text = strip_typeof(text)

    def resolve_import(ref: TypeReference) -> str:
        return resolver.resolve_import(ref.path, ref.name)

    text = substitute(text, scan_imports(text), resolve_import)

    typedef = find_typedef(text)
    if typedef:
        add_typedef(table, typedef, resolver.source_name)

    def resolve_local(ref: TypeReference) -> str:
        return resolver.resolve_identifier(ref.name, table[ref.name])

    return substitute(text, scan_locals(text, table), resolve_local)

