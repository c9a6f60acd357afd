"""Line diff data models."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class EditKind(str, Enum):
    """Kind of a single edit operation."""

    EQUAL = "equal"
    REMOVE = "remove"
    ADD = "add"

    @property
    def prefix(self) -> str:
        """Unified diff line prefix."""
        return _PREFIXES[self]


_PREFIXES = {
    EditKind.EQUAL: " ",
    EditKind.REMOVE: "-",
    EditKind.ADD: "+",
}


class EditOperation(BaseModel):
    """One step of an edit script turning the old lines into the new lines."""

    model_config = ConfigDict(frozen=True)

    kind: EditKind
    line: str

    @classmethod
    def equal(cls, line: str) -> "EditOperation":
        return cls(kind=EditKind.EQUAL, line=line)

    @classmethod
    def remove(cls, line: str) -> "EditOperation":
        return cls(kind=EditKind.REMOVE, line=line)

    @classmethod
    def add(cls, line: str) -> "EditOperation":
        return cls(kind=EditKind.ADD, line=line)


class TaggedLine(BaseModel):
    """Edit operation annotated with 0-based positions in both sequences."""

    model_config = ConfigDict(frozen=True)

    kind: EditKind
    old_index: int
    new_index: int
    text: str

    def render(self) -> str:
        return f"{self.kind.prefix}{self.text}"


class Hunk(BaseModel):
    """Context-bounded block of a unified diff."""

    model_config = ConfigDict(frozen=True)

    old_start: int  # 1-indexed
    old_count: int
    new_start: int  # 1-indexed
    new_count: int
    lines: Tuple[TaggedLine, ...]

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"

    def render(self) -> str:
        return "\n".join([self.header] + [line.render() for line in self.lines])
