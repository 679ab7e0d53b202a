"""Parser error types."""

from stylestats.errors import StyleStatsError


class ParseError(StyleStatsError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source_label: str | None = None,
    ):
        self.line = line
        self.column = column
        self.source_label = source_label
        if source_label:
            where = source_label if line is None else f"{source_label}:{line}:{column}"
            message = f"{where}: {message}"
        super().__init__(message)
