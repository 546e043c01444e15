from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every failure raised while decoding a .rm stream."""


class HeaderMismatch(DecodeError):
    def __init__(self, actual: bytes, expected: bytes) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"header does not match .rm v5 file: got {actual!r}, expected {expected!r}"
        )


class UnknownEnumValue(DecodeError):
    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"unknown {field} value {value}")


class TruncatedInput(DecodeError):
    def __init__(self, level: str, field: str, detail: str | None = None) -> None:
        self.level = level
        self.field = field
        message = f"input truncated while reading {level} field {field!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class RenderError(ValueError):
    """Raised when a projected page cannot be serialized."""
