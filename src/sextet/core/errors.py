from __future__ import annotations
from typing import Optional

class CodecError(ValueError):
    """Base class for every error raised by the codec."""

class LengthMismatchError(CodecError):
    def __init__(self, message: str, length: Optional[int] = None, expected: Optional[int] = None):
        super().__init__(message)
        self.length = length
        self.expected = expected

class InvalidSymbolError(CodecError):
    def __init__(self, message: str, position: Optional[int] = None, value: Optional[int] = None):
        super().__init__(message)
        self.position = position
        self.value = value

class ValueRangeError(CodecError):
    """A byte or group value does not fit in its bit width."""

    def __init__(self, message: str, position: Optional[int] = None, value: Optional[int] = None):
        super().__init__(message)
        self.position = position
        self.value = value

class PadCountError(CodecError):
    pass
