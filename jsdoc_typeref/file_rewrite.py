"""Data model for the rewritten comment text of one source file."""

from dataclasses import dataclass, field

from jsdoc_typeref.ast_nodes import Comment


@dataclass
class FileRewrite:
    """New comment text for a file, held apart from the tree until applied."""

    module_id: str
    comments: list[Comment] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    @classmethod
    def for_comments(cls, module_id: str, comments: list[Comment]) -> "FileRewrite":
        """Start from the current text of ``comments``."""
        return cls(module_id, list(comments), [c.value for c in comments])

    def index_of(self, comment: Comment) -> int:
        """Return the buffer slot of ``comment``, adding one if it is unknown."""
        for i, known in enumerate(self.comments):
            if known is comment:
                return i
        self.comments.append(comment)
        self.values.append(comment.value)
        return len(self.comments) - 1

    def changed(self) -> list[tuple[Comment, str]]:
        """Return the comments whose text differs from the rewritten text."""
        return [
            (comment, value)
            for comment, value in zip(self.comments, self.values, strict=True)
            if comment.value != value
        ]

    def apply(self) -> int:
        """Write the buffers back into the comment nodes; return how many changed."""
        changed = self.changed()
        for comment, value in changed:
            comment.value = value
        return len(changed)
