"""Error types with formatted source context."""

from __future__ import annotations

INVALID_DOCUMENT = "invalid document structure"


class FigureError(Exception):
    """Base class for htmlfig errors."""


class InvalidDocumentError(FigureError):
    """Raised to callers when composed markup cannot be parsed.

    Carries no parser detail; the detail is logged where the failure is caught.
    """

    def __init__(self, message: str = INVALID_DOCUMENT) -> None:
        self.message = message
        super().__init__(message)


class DocumentParseError(FigureError):
    """Raised by the parser adapter on the first markup error."""

    def __init__(
        self,
        message: str,
        source: str,
        line: int | None = None,
        column: int | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.source = source
        self.line = line
        self.column = column
        self.code = code
        super().__init__(self.format())

    def format(self, filename: str = "<template>") -> str:
        header = f"error: {self.message}"
        if self.code and self.code != self.message:
            header += f" [{self.code}]"

        if self.line is None:
            return f"{header}\n  --> {filename}"

        col = max(1, self.column or 1)
        lines = self.source.splitlines(keepends=True)
        line_idx = self.line - 1

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{header}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
