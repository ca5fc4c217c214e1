"""Error types raised inside the time services."""

from __future__ import annotations


class FormattingFailure(RuntimeError):
    """Timezone resolution or date conversion failed."""

    code = "FORMATTING_FAILURE"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AdapterError(RuntimeError):
    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
