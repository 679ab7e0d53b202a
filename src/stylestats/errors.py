"""Exception hierarchy for stylestats."""


class StyleStatsError(Exception):
    """Base class for all stylestats errors."""


class InvalidEventIdError(StyleStatsError, ValueError):
    """Raised when a filename does not start with a decimal event id."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"No leading event id in filename: {filename!r}")
