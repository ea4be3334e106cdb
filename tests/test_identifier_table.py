"""Tests for building identifier tables from real import statements."""

from pathlib import Path

import pytest

from jsdoc_typeref.ast_builder import TreeSitterAstBuilder
from jsdoc_typeref.identifier_table import build_identifier_table
from jsdoc_typeref.local_identifier import LocalIdentifier
from jsdoc_typeref.session import ResolutionSession

IMPORTS = """\
import olms, {apply as applyStyle} from 'ol-mapbox-style';
import * as proj from './proj.js';
import {View as MapView} from './view.js';

/**
 * A styled map.
 */
export class StyledMap extends olms {}

/**
 * @param {olms|applyStyle|MapView} s Style.
 * @param {proj} p Namespace imports are not resolved.
 */
function style(s, p) {}
"""

VIEW = "export class View {}\n"

ACCENTED = """\
class Émile {}
export default Émile;
"""

USES_ACCENTED = """\
import Émile from './emile.js';

/**
 * Doc.
 */
class Child extends Émile {}

/** @param {Émile|Opts} e */
function f(e) {}
"""


@pytest.fixture(scope="module")
def builder() -> TreeSitterAstBuilder:
    """Provide a shared builder."""
    return TreeSitterAstBuilder()


def test_table_from_imports(builder: TreeSitterAstBuilder) -> None:
    """Verify default, aliased, external and namespace import handling."""
    tree = builder.build(IMPORTS, "/src/map.js")
    table = build_identifier_table(tree.program.body, "/src/map.js")
    assert table == {
        "olms": LocalIdentifier(
            "ol-mapbox-style", default_import=True, external=True
        ),
        "applyStyle": LocalIdentifier(
            "ol-mapbox-style", imported="apply", external=True
        ),
        "MapView": LocalIdentifier("./view.js", imported="View"),
        "StyledMap": LocalIdentifier("map.js"),
    }
    assert "proj" not in table


def test_imports_resolve_in_comments(
    tmp_path: Path, builder: TreeSitterAstBuilder
) -> None:
    """Verify the rewritten comments of a file using every import form."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "view.js").write_text(VIEW, encoding="utf-8")
    path = src / "map.js"
    path.write_text(IMPORTS, encoding="utf-8")
    session = ResolutionSession(src, builder)

    tree = builder.build(IMPORTS, str(path))
    session.visit_node(tree, path)

    doc, params = (c.value for c in tree.comments)
    assert doc == "*\n * A styled map.\n * @extends module:ol-mapbox-style\n "
    resolved = "module:ol-mapbox-style|module:ol-mapbox-style~apply|module:view.View"
    assert "{" + resolved + "}" in params
    assert "{proj}" in params
    assert "proj" not in session.cache.summaries


def test_non_ascii_identifiers_resolve(
    tmp_path: Path, builder: TreeSitterAstBuilder
) -> None:
    """Verify that type slots and @extends agree on non-ASCII class names."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "emile.js").write_text(ACCENTED, encoding="utf-8")
    path = src / "child.js"
    path.write_text(USES_ACCENTED, encoding="utf-8")
    session = ResolutionSession(src, builder)

    tree = builder.build(USES_ACCENTED, str(path))
    session.visit_node(tree, path)

    doc, params = (c.value for c in tree.comments)
    assert doc == "*\n * Doc.\n * @extends module:emile~Émile\n "
    assert params == "* @param {module:emile~Émile|Opts} e "
