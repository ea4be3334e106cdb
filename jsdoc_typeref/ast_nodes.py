"""Data models for the ESTree-shaped syntax tree handed over by the host."""

from dataclasses import dataclass, field


@dataclass
class Comment:
    """A source comment whose text may be rewritten in place."""

    value: str  # text without the /* */ or // delimiters
    kind: str = "CommentBlock"  # CommentBlock or CommentLine
    start: int = 0
    end: int = 0

    @property
    def type(self) -> str:
        """Return the ESTree discriminator."""
        return self.kind


@dataclass
class Identifier:
    """A plain identifier reference."""

    name: str
    type: str = field(default="Identifier", init=False)


@dataclass
class Literal:
    """A literal value (string sources of imports, exported literals)."""

    value: object
    type: str = field(default="Literal", init=False)


@dataclass
class ImportDefaultSpecifier:
    """`import Foo from "..."`."""

    local: Identifier
    type: str = field(default="ImportDefaultSpecifier", init=False)


@dataclass
class ImportSpecifier:
    """`import {Foo} from "..."` or `import {Foo as Bar} from "..."`."""

    local: Identifier
    imported: Identifier | None = None
    type: str = field(default="ImportSpecifier", init=False)


@dataclass
class ImportNamespaceSpecifier:
    """`import * as ns from "..."`."""

    local: Identifier
    type: str = field(default="ImportNamespaceSpecifier", init=False)


Specifier = ImportDefaultSpecifier | ImportSpecifier | ImportNamespaceSpecifier


@dataclass
class ImportDeclaration:
    """A top-level import statement."""

    specifiers: list[Specifier]
    source: Literal
    leading_comments: list[Comment] = field(default_factory=list)
    type: str = field(default="ImportDeclaration", init=False)


@dataclass
class ClassDeclaration:
    """A class declaration, optionally with a superclass."""

    id: Identifier | None
    super_class: Identifier | None = None
    leading_comments: list[Comment] = field(default_factory=list)
    type: str = field(default="ClassDeclaration", init=False)


@dataclass
class Statement:
    """Any top-level statement the resolver does not look into."""

    type: str
    leading_comments: list[Comment] = field(default_factory=list)


Declaration = ClassDeclaration | Statement


@dataclass
class ExportNamedDeclaration:
    """`export class Foo {}`, `export {a, b}` and friends."""

    declaration: Declaration | None = None
    leading_comments: list[Comment] = field(default_factory=list)
    type: str = field(default="ExportNamedDeclaration", init=False)


@dataclass
class ExportDefaultDeclaration:
    """`export default <expression or declaration>`."""

    declaration: Identifier | Literal | Declaration
    leading_comments: list[Comment] = field(default_factory=list)
    type: str = field(default="ExportDefaultDeclaration", init=False)


Node = (
    ImportDeclaration
    | ClassDeclaration
    | ExportNamedDeclaration
    | ExportDefaultDeclaration
    | Statement
)


@dataclass
class Program:
    """The top-level statement list of a module."""

    body: list[Node] = field(default_factory=list)
    type: str = field(default="Program", init=False)


@dataclass
class File:
    """Root node: the program plus every comment found in the source."""

    program: Program
    comments: list[Comment] = field(default_factory=list)
    type: str = field(default="File", init=False)
