# AoC 2025 - Input Errors
# Created:      2026-10-19
# Modified:     2026-10-19


class InputError(ValueError):
    """Raised when puzzle input text cannot be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
