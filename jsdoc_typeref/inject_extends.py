"""Logic for adding `@extends` tags to class comments."""

import re

LINE_BREAK_RE = re.compile(r"\r?\n")


def inject_extends(comment: str, target: str) -> str:
    """Put ` * @extends <target>` right before the comment's closing line."""
    lines = LINE_BREAK_RE.split(comment)
    lines.append(lines[-1])
    lines[-2] = f" * @extends {target}"
    return "\n".join(lines)
