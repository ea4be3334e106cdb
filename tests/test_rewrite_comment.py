"""Tests for rewriting type references in a single comment."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from jsdoc_typeref.ast_nodes import (
    ClassDeclaration,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    File,
    Identifier,
    Program,
)
from jsdoc_typeref.local_identifier import LocalIdentifier
from jsdoc_typeref.module_cache import ModuleCache
from jsdoc_typeref.reference_resolver import ReferenceResolver
from jsdoc_typeref.rewrite_comment import rewrite_comment

ROOT = Path("/project/src")


@pytest.fixture
def resolver() -> ReferenceResolver:
    """Provide a resolver for /project/src/ui/view.js with two known modules."""
    builder = MagicMock()
    cache = ModuleCache(ROOT, builder)
    cache.register_file(
        "Map",
        File(
            Program(
                [
                    ClassDeclaration(Identifier("Map")),
                    ExportDefaultDeclaration(Identifier("Map")),
                ]
            )
        ),
    )
    cache.register_file(
        "ui/view",
        File(Program([ExportNamedDeclaration(ClassDeclaration(Identifier("View")))])),
    )
    return ReferenceResolver(cache, ROOT / "ui" / "view.js")


def test_import_default_and_named(resolver: ReferenceResolver) -> None:
    """Verify default and named import expressions resolve with their delimiters."""
    text = '* @param {import("../Map.js").default|import("./view.js").View} v V.'
    assert rewrite_comment(text, {}, resolver) == (
        "* @param {module:Map~Map|module:ui/view.View} v V."
    )


def test_import_named_not_class(resolver: ReferenceResolver) -> None:
    """Verify that a name outside the named exports gets the `~` delimiter."""
    text = '{import("../Map.js").Options}'
    assert rewrite_comment(text, {}, resolver) == "{module:Map~Options}"


def test_typeof_is_stripped(resolver: ReferenceResolver) -> None:
    """Verify that `typeof` has no effect beyond being removed."""
    plain = rewrite_comment('{import("../Map.js").default}', {}, resolver)
    typed = rewrite_comment('{typeof import("../Map.js").default}', {}, resolver)
    assert plain == typed == "{module:Map~Map}"


def test_external_packages(resolver: ReferenceResolver) -> None:
    """Verify the simplified rule for imports outside the module root."""
    text = '{import("left-pad").default} {import("left-pad").pad}\n'
    assert rewrite_comment(text, {}, resolver) == "{module:left-pad} {module:left-pad~pad}\n"
    resolver.cache.builder.build.assert_not_called()


def test_local_identifiers(resolver: ReferenceResolver) -> None:
    """Verify that table entries resolve in type slots and nowhere else."""
    table = {
        "Map": LocalIdentifier("../Map.js", default_import=True),
        "View": LocalIdentifier("view.js"),
        "Style": LocalIdentifier("ol/style", imported="Style", external=True),
    }
    text = "* @fires Map\n* @param {Array<View>, Map|Style} x A Map, View."
    assert rewrite_comment(text, table, resolver) == (
        "* @fires module:Map~Map\n"
        "* @param {Array<module:ui/view.View>, module:Map~Map|module:ol/style~Style}"
        " x A Map, module:ui/view.View."
    )


def test_typedef_registers_identifier(resolver: ReferenceResolver) -> None:
    """Verify that a typedef becomes resolvable in its own and later comments."""
    table: dict[str, LocalIdentifier] = {}
    first = rewrite_comment("*\n * @typedef {Object} Options\n ", table, resolver)
    assert first == "*\n * @typedef {Object} Options\n "
    assert table["Options"] == LocalIdentifier("view.js")
    assert rewrite_comment("* @param {Options} o O. ", table, resolver) == (
        "* @param {module:ui/view~Options} o O. "
    )
