# src/bencodec/decoder.py
import logging
from typing import Optional, Tuple, Union

from . import config
from .errors import InvalidArgument, DecodeError, MalformedInput, TruncatedInput, NestingTooDeep
from .value import Value, Integer, ByteString, List, Dict, Kind

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview, str]

# Marks "use the configured default", since None already means "no limit"
_DEFAULT_DEPTH = object()

# Largest magnitude a signed 64-bit integer can hold (reached by INT64_MIN)
_MAX_MAGNITUDE = -config.INT64_MIN


def _as_buffer(data: Buffer) -> Union[bytes, bytearray]:
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, memoryview):
        return data.tobytes()
    if isinstance(data, str):
        return data.encode('utf-8')
    raise InvalidArgument(f"Cannot decode object of type {type(data).__name__}")


class BencodeDecoder:
    """
    Recursive-descent decoder over a complete in-memory buffer.

    ``index`` is the cursor: the offset of the next unconsumed byte. Every
    decode method leaves it one past the last byte of the element it read,
    so sibling elements are read from consecutive, disjoint spans.

    Args:
        data: the encoded buffer
        index (int): where decoding starts
        max_depth (Optional[int]): deepest allowed list/dict nesting, None for no limit
        strict (Optional[bool]): reject non-canonical input (leading zeros,
            negative zero, unsorted or duplicate dictionary keys)
    """
    def __init__(self, data: Buffer, index: int = 0,
                 max_depth=_DEFAULT_DEPTH, strict: Optional[bool] = None):
        self.data = _as_buffer(data)
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidArgument(f"Start position must be a non-negative int, got {index!r}")
        self.index = index
        self.max_depth = config.MAX_NESTING_DEPTH if max_depth is _DEFAULT_DEPTH else max_depth
        self.strict = config.STRICT_DECODING if strict is None else strict
        self.depth = 0

    def _next(self) -> str:
        """Consume one byte and return it as a character."""
        if self.index >= len(self.data):
            raise TruncatedInput("Truncated data", self.index)
        char = chr(self.data[self.index])
        self.index += 1
        return char

    def _peek(self) -> str:
        if self.index >= len(self.data):
            raise TruncatedInput("Truncated data", self.index)
        return chr(self.data[self.index])

    def decode(self) -> Value:
        """
        Decode one complete element starting at the cursor.

        Returns:
            Value: the element; ``index`` is left just past it
        """
        start = self.index
        self.depth = 0
        logger.debug(f"Decoding element at position {start} of {len(self.data)} bytes")
        try:
            value = self._decode_element()
        except RecursionError:
            error = NestingTooDeep("Nesting exceeds the interpreter recursion limit", self.index)
            logger.debug(f"Decode failed: {error}")
            raise error from None
        except DecodeError as e:
            logger.debug(f"Decode failed: {e}")
            raise
        finally:
            self.depth = 0
        logger.debug(f"Decoded {value.kind.label} spanning positions {start}-{self.index}")
        return value

    def _decode_element(self) -> Value:
        """Decode the element at the cursor, dispatching on its first byte"""
        start = self.index
        char = self._next()

        if char == 'i':
            return self._decode_int(start)
        elif '0' <= char <= '9':
            return self._decode_string(char, start)
        elif char == 'l':
            return self._decode_list(start)
        elif char == 'd':
            return self._decode_dict(start)
        else:
            raise MalformedInput("Invalid character", start)

    def _enter(self, start: int) -> None:
        self.depth += 1
        if self.max_depth is not None and self.depth > self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", start)

    def _decode_int(self, start: int) -> Integer:
        char = self._next()
        negative = char == '-'
        if negative:
            char = self._next()

        digits_start = self.index - 1
        number = 0
        while char != 'e':
            if not '0' <= char <= '9':
                raise MalformedInput("Expected 0-9", self.index - 1)
            number = number * 10 + ord(char) - ord('0')
            if number > _MAX_MAGNITUDE:
                raise MalformedInput("Integer out of range", start)
            char = self._next()

        digit_count = self.index - 1 - digits_start
        if digit_count == 0:
            raise MalformedInput("Expected 0-9", self.index - 1)

        if self.strict:
            if negative and number == 0:
                raise MalformedInput("Negative zero is not allowed", start)
            if digit_count > 1 and chr(self.data[digits_start]) == '0':
                raise MalformedInput("Leading zeros are not allowed", digits_start)

        if negative:
            number = -number
        elif number > config.INT64_MAX:
            raise MalformedInput("Integer out of range", start)
        return Integer(number)

    def _decode_string(self, char: str, start: int) -> ByteString:
        length = 0
        while char != ':':
            if not '0' <= char <= '9':
                raise MalformedInput("Expected 0-9", self.index - 1)
            # anything longer than the buffer is truncated, no need to keep growing
            if length <= len(self.data):
                length = length * 10 + ord(char) - ord('0')
            char = self._next()

        if self.strict and self.index - start > 2 and chr(self.data[start]) == '0':
            raise MalformedInput("Leading zeros are not allowed", start)

        end = self.index + length
        if end > len(self.data):
            raise TruncatedInput("Truncated data", len(self.data))

        result = ByteString(self.data[self.index:end])
        self.index = end
        return result

    def _decode_list(self, start: int) -> List:
        self._enter(start)
        result = List()
        try:
            while self._peek() != 'e':
                result.append(self._decode_element())
        finally:
            self.depth -= 1

        self.index += 1  # Skip past 'e'
        return result

    def _decode_dict(self, start: int) -> Dict:
        self._enter(start)
        result = Dict()
        previous_key = None

        try:
            while self._peek() != 'e':
                key_start = self.index
                key = self._decode_element()
                if key.kind is not Kind.BYTES:
                    raise MalformedInput("Dictionary keys must be binary strings", key_start)

                raw_key = key.as_bytes()
                if self.strict and previous_key is not None and raw_key <= previous_key:
                    raise MalformedInput("Dictionary keys must be sorted and unique", key_start)
                previous_key = raw_key

                # Duplicate keys: the last occurrence wins
                result.field_set(raw_key, self._decode_element())
        finally:
            self.depth -= 1

        self.index += 1  # Skip past 'e'
        return result


def decode_from(data: Buffer, index: int = 0, max_depth=_DEFAULT_DEPTH,
                strict: Optional[bool] = None) -> Tuple[Value, int]:
    """
    Decode one element starting at ``index``.

    Args:
        data: the encoded buffer
        index (int): offset of the element's first byte

    Returns:
        Tuple[Value, int]: the element and the offset just past it
    """
    decoder = BencodeDecoder(data, index, max_depth=max_depth, strict=strict)
    value = decoder.decode()
    return value, decoder.index


def decode(data: Buffer, max_depth=_DEFAULT_DEPTH, strict: Optional[bool] = None) -> Value:
    """Helper function to decode the first element of bencode data"""
    buffer = _as_buffer(data)
    value, end = decode_from(buffer, 0, max_depth=max_depth, strict=strict)
    if end < len(buffer):
        logger.debug(f"Ignoring {len(buffer) - end} trailing bytes after position {end}")
    return value
