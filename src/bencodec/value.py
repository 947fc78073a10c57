# src/bencodec/value.py
from enum import Enum
from typing import Dict as DictType, Iterator, List as ListType, Optional, Tuple, Union, Any

from .config import INT64_MIN, INT64_MAX
from .errors import InvalidArgument, TypeMismatch, KeyNotFound, IndexOutOfRange


class Kind(Enum):
    NONE = 0
    INTEGER = 1
    BYTES = 2
    LIST = 3
    DICT = 4

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    Kind.NONE: 'none',
    Kind.INTEGER: 'integer',
    Kind.BYTES: 'byte string',
    Kind.LIST: 'list',
    Kind.DICT: 'dict',
}


def _to_key(key: Any) -> bytes:
    """Normalize a dictionary key to raw bytes."""
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode('utf-8')
    if isinstance(key, ByteString):
        return key.as_bytes()
    raise TypeMismatch(Kind.BYTES, _label_of(key))


def _label_of(obj: Any) -> str:
    if isinstance(obj, Value):
        return obj.kind.label
    return type(obj).__name__


def _coerce(obj: Any) -> 'Value':
    """Turn raw integers and byte strings into values, pass values through."""
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, int) and not isinstance(obj, bool):
        return Integer(obj)
    if isinstance(obj, (bytes, bytearray, memoryview, str)):
        return ByteString(obj)
    raise TypeMismatch('a bencode value', _label_of(obj))


class Value:
    """
    A single bencode element.

    The bare ``Value()`` instance has kind ``Kind.NONE``: a placeholder that
    cannot be encoded. Real elements are instances of the ``Integer``,
    ``ByteString``, ``List`` and ``Dict`` subclasses, each of which stores only
    its own payload. Accessors for another kind raise ``TypeMismatch``.
    """
    __slots__ = ()

    kind = Kind.NONE

    @staticmethod
    def new(kind: Kind) -> 'Value':
        """
        Create an empty value of the given kind.

        Args:
            kind (Kind): any kind except Kind.NONE

        Returns:
            Value: Integer(0), ByteString(b''), an empty List or an empty Dict
        """
        if not isinstance(kind, Kind):
            raise InvalidArgument(f"Not a value kind: {kind!r}")
        if kind is Kind.NONE:
            raise InvalidArgument("Kind.NONE is not a valid value type")
        return _KIND_CLASSES[kind]()

    @staticmethod
    def from_integer(number: int) -> 'Integer':
        return Integer(number)

    @staticmethod
    def from_bytes(data: Union[bytes, bytearray, memoryview, str]) -> 'ByteString':
        return ByteString(data)

    @staticmethod
    def from_python(obj: Any) -> 'Value':
        """
        Build a value tree from native Python objects.

        ints become Integer, bytes and str become ByteString, lists and tuples
        become List, and dicts become Dict. Values already in the tree are
        kept as they are.
        """
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, (list, tuple)):
            result = List()
            for item in obj:
                result.append(Value.from_python(item))
            return result
        if isinstance(obj, dict):
            result = Dict()
            for key, item in obj.items():
                result.field_set(key, Value.from_python(item))
            return result
        return _coerce(obj)

    def to_python(self) -> Any:
        raise InvalidArgument("A none value has no Python equivalent")

    def _mismatch(self, expected: Kind) -> TypeMismatch:
        return TypeMismatch(expected, self.kind)

    # --- Accessors, overridden by the kind that supports them ---

    def as_integer(self) -> int:
        raise self._mismatch(Kind.INTEGER)

    def as_bytes(self) -> bytes:
        raise self._mismatch(Kind.BYTES)

    def index(self, i: int) -> 'Value':
        raise self._mismatch(Kind.LIST)

    def index_set(self, i: int, value: Any) -> None:
        raise self._mismatch(Kind.LIST)

    def append(self, value: Any) -> None:
        raise self._mismatch(Kind.LIST)

    def field(self, key: Any) -> 'Value':
        raise self._mismatch(Kind.DICT)

    def field_set(self, key: Any, value: Any) -> None:
        raise self._mismatch(Kind.DICT)

    # --- Subscript sugar: integers address lists, anything else addresses dicts ---

    def __getitem__(self, key):
        if isinstance(key, int) and not isinstance(key, bool):
            return self.index(key)
        return self.field(key)

    def __setitem__(self, key, value):
        if isinstance(key, int) and not isinstance(key, bool):
            self.index_set(key, value)
        else:
            self.field_set(key, value)

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return other.kind is Kind.NONE and self.kind is Kind.NONE

    def __hash__(self):
        return hash(Kind.NONE)

    def __repr__(self) -> str:
        return 'Value()'


class Integer(Value):
    __slots__ = ('_number',)

    kind = Kind.INTEGER

    def __init__(self, number: int = 0):
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidArgument(f"Integer expects an int, got {type(number).__name__}")
        if not INT64_MIN <= number <= INT64_MAX:
            raise InvalidArgument(f"Integer {number} does not fit in 64 bits")
        self._number = number

    def as_integer(self) -> int:
        return self._number

    def to_python(self) -> int:
        return self._number

    def __int__(self) -> int:
        return self._number

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return isinstance(other, Integer) and other._number == self._number

    def __hash__(self):
        return hash((Kind.INTEGER, self._number))

    def __repr__(self) -> str:
        return f'Integer({self._number})'


class ByteString(Value):
    __slots__ = ('_data',)

    kind = Kind.BYTES

    def __init__(self, data: Union[bytes, bytearray, memoryview, str] = b''):
        if isinstance(data, str):
            data = data.encode('utf-8')
        elif isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise InvalidArgument(f"ByteString expects bytes, got {type(data).__name__}")
        self._data = data

    def as_bytes(self) -> bytes:
        return self._data

    def to_python(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return isinstance(other, ByteString) and other._data == self._data

    def __hash__(self):
        return hash((Kind.BYTES, self._data))

    def __repr__(self) -> str:
        return f'ByteString({self._data!r})'


class List(Value):
    """Ordered sequence of values; insertion order is the encoded order."""
    __slots__ = ('_items',)

    kind = Kind.LIST

    def __init__(self, items: Optional[ListType[Any]] = None):
        self._items: ListType[Value] = []
        for item in items or ():
            self.append(item)

    def _check_index(self, i) -> None:
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeMismatch('int index', _label_of(i))

    def index(self, i: int) -> Value:
        self._check_index(i)
        try:
            return self._items[i]
        except IndexError as e:
            raise IndexOutOfRange(i, len(self._items)) from e

    def index_set(self, i: int, value: Any) -> None:
        self._check_index(i)
        value = _coerce(value)
        try:
            self._items[i] = value
        except IndexError as e:
            raise IndexOutOfRange(i, len(self._items)) from e

    def append(self, value: Any) -> None:
        self._items.append(_coerce(value))

    def to_python(self) -> ListType[Any]:
        return [item.to_python() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return isinstance(other, List) and other._items == self._items

    __hash__ = None

    def __repr__(self) -> str:
        return f'List({self._items!r})'


class Dict(Value):
    """
    Mapping from raw byte-string keys to values.

    Storage order is irrelevant; keys(), items() and iteration always yield
    keys sorted byte-lexicographically, the order they are encoded in.
    """
    __slots__ = ('_entries',)

    kind = Kind.DICT

    def __init__(self, entries: Optional[DictType[Any, Any]] = None):
        self._entries: DictType[bytes, Value] = {}
        for key, value in (entries or {}).items():
            self.field_set(key, value)

    def field(self, key: Any) -> Value:
        key = _to_key(key)
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def field_set(self, key: Any, value: Any) -> None:
        self._entries[_to_key(key)] = _coerce(value)

    def keys(self) -> ListType[bytes]:
        return sorted(self._entries)

    def items(self) -> ListType[Tuple[bytes, Value]]:
        return [(key, self._entries[key]) for key in self.keys()]

    def to_python(self) -> DictType[bytes, Any]:
        return {key: value.to_python() for key, value in self.items()}

    def __contains__(self, key) -> bool:
        try:
            return _to_key(key) in self._entries
        except TypeMismatch:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.keys())

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return isinstance(other, Dict) and other._entries == self._entries

    __hash__ = None

    def __repr__(self) -> str:
        return f'Dict({dict(self.items())!r})'


_KIND_CLASSES = {
    Kind.INTEGER: Integer,
    Kind.BYTES: ByteString,
    Kind.LIST: List,
    Kind.DICT: Dict,
}
