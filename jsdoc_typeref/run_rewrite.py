"""Command-line driver that rewrites every module under the module root."""

import argparse
import logging
from pathlib import Path

from jsdoc_typeref.ast_builder import TreeSitterAstBuilder
from jsdoc_typeref.exceptions import TypeRefError
from jsdoc_typeref.load_config import load_config
from jsdoc_typeref.render_source import render_source
from jsdoc_typeref.session import ResolutionSession

logger = logging.getLogger(__name__)


def run_rewrite(args: argparse.Namespace) -> int:
    """Rewrite the doc comments of all modules and write or report the result."""
    config = load_config(args.config)
    builder = TreeSitterAstBuilder()
    session = ResolutionSession.from_config(config, builder, args.cwd)

    extension = session.cache.extension
    sources = sorted(p for p in session.root.rglob(f"*{extension}") if p.is_file())
    if not sources:
        msg = f"No *{extension} files found under: {session.root}"
        raise SystemExit(msg)

    out_root = args.out_dir.resolve() if args.out_dir else None
    total = 0
    for path in sources:
        source = path.read_text(encoding="utf-8")
        module_id = session.module_id(path)
        tree = session.cache.file_nodes.get(module_id) or builder.build(
            source, str(path)
        )
        changed = session.rewrite_file(tree, path).apply()
        total += changed
        if changed:
            logger.info("%s: %d comments rewritten", module_id, changed)
        if args.dry_run or out_root is None:
            continue
        out_file = out_root / path.relative_to(session.root)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(render_source(source, tree.comments), encoding="utf-8")

    if args.dry_run:
        print(f"Dry run: {total} comments in {len(sources)} modules would change")
    else:
        print(f"Rewrote {total} comments in {len(sources)} modules into: {out_root}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the rewrite."""
    ap = argparse.ArgumentParser(
        description=(
            'Rewrite import("...") type references in JSDoc comments to '
            "module: paths."
        ),
    )
    ap.add_argument(
        "config",
        type=Path,
        help='YAML or JSON config with a "typescript.moduleRoot" setting',
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        help="Directory receiving the rewritten sources",
    )
    ap.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Directory the module root is relative to (default: current)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Report how many comments would change without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every rewritten module",
    )
    args = ap.parse_args(argv)
    if not args.dry_run and args.out_dir is None:
        ap.error("--out-dir is required unless --dry-run is given")
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        return run_rewrite(args)
    except TypeRefError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
