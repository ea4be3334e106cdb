"""Build ESTree-shaped syntax trees from JavaScript source with tree-sitter."""

import logging
from typing import Protocol

import tree_sitter_javascript
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from jsdoc_typeref.ast_nodes import (
    ClassDeclaration,
    Comment,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    File,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Literal,
    Node,
    Program,
    Specifier,
    Statement,
)

logger = logging.getLogger(__name__)

# tree-sitter statement types -> ESTree discriminators for statements we skip
ESTREE_TYPES = {
    "lexical_declaration": "VariableDeclaration",
    "variable_declaration": "VariableDeclaration",
    "function_declaration": "FunctionDeclaration",
    "generator_function_declaration": "FunctionDeclaration",
    "expression_statement": "ExpressionStatement",
    "empty_statement": "EmptyStatement",
}


class AstBuilder(Protocol):
    """Anything that can turn source text into a `File` tree."""

    def build(self, source: str, file_path: str) -> File:
        """Parse ``source`` read from ``file_path``."""
        ...


class TreeSitterAstBuilder:
    """Parses JavaScript modules with the tree-sitter JavaScript grammar."""

    def __init__(self) -> None:
        """Load the JavaScript grammar."""
        self.language = Language(tree_sitter_javascript.language())
        self.parser = Parser(self.language)

    def build(self, source: str, file_path: str) -> File:
        """Parse ``source`` into a `File` with comments and leading comments."""
        tree = self.parser.parse(source.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            logger.warning("Syntax errors while parsing %s", file_path)

        comments: dict[int, Comment] = {}
        for ts_comment in _iter_comments(root):
            comments[ts_comment.start_byte] = _comment(ts_comment)

        body: list[Node] = []
        pending: list[Comment] = []
        for child in root.named_children:
            if child.type == "comment":
                pending.append(comments[child.start_byte])
                continue
            node = _statement(child)
            _attach_leading(node, pending)
            body.append(node)
            pending = []

        ordered = [comments[k] for k in sorted(comments)]
        return File(program=Program(body=body), comments=ordered)


def _iter_comments(root: TSNode) -> list[TSNode]:
    """Collect every comment node in the tree, nested ones included."""
    found = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "comment":
            found.append(node)
        stack.extend(node.children)
    return found


def _comment(node: TSNode) -> Comment:
    """Convert a comment node, dropping its delimiters."""
    text = _text(node)
    if text.startswith("/*"):
        return Comment(text[2:-2], "CommentBlock", node.start_byte, node.end_byte)
    return Comment(text[2:], "CommentLine", node.start_byte, node.end_byte)


def _text(node: TSNode) -> str:
    """Return the source text of a node."""
    return node.text.decode("utf-8") if node.text is not None else ""


def _string_value(node: TSNode) -> str:
    """Return a string literal without its quotes."""
    return _text(node)[1:-1]


def _attach_leading(node: Node, comments: list[Comment]) -> None:
    """Attach leading comments to a statement and to the class it exports."""
    node.leading_comments = list(comments)
    inner = getattr(node, "declaration", None)
    if isinstance(inner, ClassDeclaration) and not inner.leading_comments:
        inner.leading_comments = list(comments)


def _statement(node: TSNode) -> Node:
    """Convert one top-level statement."""
    if node.type == "import_statement":
        return _import(node)
    if node.type == "export_statement":
        return _export(node)
    if node.type == "class_declaration":
        return _class(node)
    return Statement(ESTREE_TYPES.get(node.type, node.type))


def _import(node: TSNode) -> ImportDeclaration:
    """Convert an import statement with its specifiers."""
    source = node.child_by_field_name("source")
    specifiers: list[Specifier] = []
    for clause in node.named_children:
        if clause.type != "import_clause":
            continue
        for part in clause.named_children:
            if part.type == "identifier":
                specifiers.append(ImportDefaultSpecifier(Identifier(_text(part))))
            elif part.type == "namespace_import":
                local = part.named_children[-1]
                specifiers.append(ImportNamespaceSpecifier(Identifier(_text(local))))
            elif part.type == "named_imports":
                specifiers.extend(_named_imports(part))
    value = _string_value(source) if source is not None else ""
    return ImportDeclaration(specifiers=specifiers, source=Literal(value))


def _named_imports(node: TSNode) -> list[Specifier]:
    """Convert the `{a, b as c}` part of an import."""
    specifiers: list[Specifier] = []
    for spec in node.named_children:
        if spec.type != "import_specifier":
            continue
        name = spec.child_by_field_name("name")
        alias = spec.child_by_field_name("alias")
        imported = _string_value(name) if name.type == "string" else _text(name)
        local = _text(alias) if alias is not None else imported
        specifiers.append(ImportSpecifier(Identifier(local), Identifier(imported)))
    return specifiers


def _class(node: TSNode) -> ClassDeclaration:
    """Convert a class declaration and its superclass."""
    name = node.child_by_field_name("name")
    super_class = None
    for child in node.named_children:
        if child.type == "class_heritage" and child.named_children:
            # non-identifier superclasses (`ns.Base`, calls) keep their source text
            super_class = Identifier(_text(child.named_children[0]))
    return ClassDeclaration(
        id=Identifier(_text(name)) if name is not None else None,
        super_class=super_class,
    )


def _export(node: TSNode) -> ExportNamedDeclaration | ExportDefaultDeclaration:
    """Convert a named or default export statement."""
    is_default = any(child.type == "default" for child in node.children)
    declaration = node.child_by_field_name("declaration")
    inner: Node | None = None
    if declaration is not None:
        inner = _statement(declaration)
    if not is_default:
        return ExportNamedDeclaration(declaration=inner)
    if inner is not None:
        return ExportDefaultDeclaration(declaration=inner)
    value = node.child_by_field_name("value")
    if value is not None and value.type == "identifier":
        return ExportDefaultDeclaration(declaration=Identifier(_text(value)))
    return ExportDefaultDeclaration(declaration=Literal(_text(value) if value else None))
