"""Errors raised while resolving documentation type references."""

from pathlib import Path


class TypeRefError(Exception):
    """Base class for fatal errors that abort a documentation run."""


class ConfigurationError(TypeRefError):
    """The module root setting is missing or points nowhere."""


class UnresolvableModuleError(TypeRefError, FileNotFoundError):
    """A referenced module has no readable source file under the module root."""

    def __init__(self, module_id: str, path: Path) -> None:
        """Record which module was requested and where it was looked for."""
        super().__init__(f'Cannot read module "{module_id}" from {path}')
        self.module_id = module_id
        self.path = path
