"""Source location tracking for AdamScript diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A location in AdamScript source code."""

    file: str
    offset: int  # byte offset, 0-indexed
    line: int  # 1-indexed
    column: int  # 1-indexed, in bytes

    @classmethod
    def from_offset(cls, source: str, offset: int, file: str = "<string>") -> SourceLocation:
        """Resolve a byte *offset* into *source* to a line/column location."""
        prefix = source.encode("utf-8", "surrogatepass")[:offset]
        line = prefix.count(b"\n") + 1
        column = offset - (prefix.rfind(b"\n") + 1) + 1
        return cls(file=file, offset=offset, line=line, column=column)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
