# src/bencodec/__init__.py
from .errors import (
    BencodeError,
    InvalidArgument,
    TypeMismatch,
    KeyNotFound,
    IndexOutOfRange,
    DecodeError,
    MalformedInput,
    TruncatedInput,
    NestingTooDeep,
)
from .value import Kind, Value, Integer, ByteString, List, Dict
from .decoder import BencodeDecoder, decode, decode_from
from .encoder import BencodeEncoder, encode
from .utils import setup_logger, serialize, deserialize

__version__ = '0.1'

__all__ = [
    'BencodeError', 'InvalidArgument', 'TypeMismatch', 'KeyNotFound',
    'IndexOutOfRange', 'DecodeError', 'MalformedInput', 'TruncatedInput',
    'NestingTooDeep',
    'Kind', 'Value', 'Integer', 'ByteString', 'List', 'Dict',
    'BencodeDecoder', 'decode', 'decode_from',
    'BencodeEncoder', 'encode',
    'setup_logger', 'serialize', 'deserialize',
]
