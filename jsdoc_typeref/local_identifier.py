"""Data model for identifiers visible at the top level of one file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalIdentifier:
    """Where an in-file identifier comes from.

    ``source`` is the import path for imported bindings and the file's own
    basename for classes and typedefs declared in the file.
    """

    source: str
    default_import: bool = False
    imported: str | None = None  # exported name, when it differs from the local one
    external: bool = False  # imported from a package outside the module root
