"""Custom exception hierarchy for the auscultation sound simulator."""


class AuscultSimError(Exception):
    """Base exception for all simulator errors."""


class InvalidParameterError(AuscultSimError):
    """Raised when a caller-supplied parameter is outside its valid range."""

    def __init__(self, name: str, value: object, detail: str) -> None:
        self.name = name
        self.value = value
        self.detail = detail
        super().__init__(f"Invalid parameter '{name}'={value!r}: {detail}")
