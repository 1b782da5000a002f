# core/exceptions.py
"""Calendar error types."""


class InvalidDateError(ValueError):
    """Raised when a year/month/day triple is not a real calendar date."""

    def __init__(self, date_string: str):
        self.date_string = date_string
        super().__init__(f"Invalid date: {date_string}")


class ResolutionNotSetError(RuntimeError):
    """Raised when cells are requested before a resolution is configured."""

    def __init__(self):
        super().__init__(
            "No resolution configured; call set_resolution() before build_cells()"
        )
