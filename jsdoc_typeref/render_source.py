"""Logic for splicing rewritten comments back into source text."""

from jsdoc_typeref.ast_nodes import Comment


def render_comment(comment: Comment) -> str:
    """Render a comment node with its delimiters."""
    if comment.kind == "CommentLine":
        return "//" + "\n//".join(comment.value.split("\n"))
    return f"/*{comment.value}*/"


def render_source(source: str, comments: list[Comment]) -> str:
    """Replace each comment's original span in ``source`` with its current text.

    Spans are UTF-8 byte offsets into the parsed source.
    """
    data = source.encode("utf-8")
    parts: list[bytes] = []
    pos = 0
    for comment in sorted(comments, key=lambda c: c.start):
        parts.append(data[pos : comment.start])
        parts.append(render_comment(comment).encode("utf-8"))
        pos = comment.end
    parts.append(data[pos:])
    return b"".join(parts).decode("utf-8")
