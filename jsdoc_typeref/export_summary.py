"""Data model for what a module exports."""

from dataclasses import dataclass, field


@dataclass
class ExportSummary:
    """Default-exported and named-exported class names of one module."""

    default_export: str | None = None
    named_exports: set[str] = field(default_factory=set)

    def delimiter_for(self, symbol: str | None) -> str:
        """Return `.` for named exports and `~` for everything else."""
        return "." if symbol in self.named_exports else "~"
