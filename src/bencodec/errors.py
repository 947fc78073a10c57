# src/bencodec/errors.py
from typing import Optional


class BencodeError(ValueError):
    """Base class for every error raised by the codec."""


class InvalidArgument(BencodeError):
    pass


class TypeMismatch(BencodeError, TypeError):
    """An accessor was used on a value of the wrong kind."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        # kinds carry a label, plain type names are passed as str
        expected_label = getattr(expected, 'label', expected)
        actual_label = getattr(actual, 'label', actual)
        super().__init__(f"Expected {expected_label}, got {actual_label}")


class KeyNotFound(BencodeError, KeyError):
    def __init__(self, key: bytes):
        self.key = key
        super().__init__(f"Key not found: {key!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the whole message
        return self.args[0]


class IndexOutOfRange(BencodeError, IndexError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"List index {index} out of range (length {length})")


class DecodeError(BencodeError):
    """
    Raised while decoding; remembers the byte offset of the failure.

    Args:
        message (str): what went wrong
        position (int): offset in the input buffer
    """
    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} (pos {position})")


class MalformedInput(DecodeError):
    pass


class TruncatedInput(DecodeError):
    pass


class NestingTooDeep(MalformedInput):
    pass
