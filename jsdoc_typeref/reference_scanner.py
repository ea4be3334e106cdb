"""Logic for locating type references inside documentation comment text."""

import re
from collections.abc import Callable, Collection
from dataclasses import dataclass

TYPEOF_RE = re.compile(r"typeof ")
# import("path").Export, stopping before the character that ends the type
IMPORT_RE = re.compile(
    r"(?:typeof )?import\((?P<q>[\"'])(?P<path>[^\"']*)(?P=q)\)"
    r"\.(?P<export>[^ .|}><,)=\n]*)(?=[ .|}><,)=\n])"
)
# an identifier in a type slot: after @fires, or after { < | , and one optional space
LOCAL_RE = re.compile(
    r"(?P<trigger>@fires |[{<|,] ?)(?P<name>(?:[^\W\d]|\$)[\w$]*)"
)
CONTINUATION_RE = re.compile(r"\r?\n?\s*\*\s")
TYPEDEF_RE = re.compile(r"@typedef \{[^}]*\} ([^ \r?\n]*)")


@dataclass(frozen=True)
class TypeReference:
    """One type reference found in a comment, located by character span."""

    start: int
    end: int
    kind: str  # "import" or "local"
    name: str  # export name for imports, identifier for locals
    path: str = ""  # import path, only for "import" references


def strip_typeof(text: str) -> str:
    """Drop `typeof ` markers; constructor types resolve like instance types."""
    return TYPEOF_RE.sub("", text)


def scan_imports(text: str) -> list[TypeReference]:
    """Find every `import("...").Name` expression in ``text``."""
    return [
        TypeReference(m.start(), m.end(), "import", m.group("export"), m.group("path"))
        for m in IMPORT_RE.finditer(text)
    ]


def scan_locals(text: str, names: Collection[str]) -> list[TypeReference]:
    """Find type-slot occurrences of any identifier in ``names``.

    The span covers the identifier only, so the trigger character stays put.
    """
    return [
        TypeReference(m.start("name"), m.end(), "local", m.group("name"))
        for m in LOCAL_RE.finditer(text)
        if m.group("name") in names
    ]


def find_typedef(text: str) -> str | None:
    """Return the name declared by a `@typedef {...} Name` tag, if present."""
    match = TYPEDEF_RE.search(CONTINUATION_RE.sub(" ", text))
    if match and match.group(1):
        return match.group(1)
    return None


def substitute(
    text: str,
    references: list[TypeReference],
    resolve: Callable[[TypeReference], str],
) -> str:
    """Replace each reference span with its resolved path."""
    parts: list[str] = []
    pos = 0
    for ref in sorted(references, key=lambda r: r.start):
        parts.append(text[pos : ref.start])
        parts.append(resolve(ref))
        pos = ref.end
    parts.append(text[pos:])
    return "".join(parts)
