# src/bencodec/encoder.py
from .errors import InvalidArgument
from .value import Value, Kind


class BencodeEncoder:
    @staticmethod
    def encode(value: Value) -> bytes:
        """Encode a value tree to its canonical bencode form"""
        out = bytearray()
        BencodeEncoder._encode_into(value, out)
        return bytes(out)

    @staticmethod
    def _encode_into(value: Value, out: bytearray) -> None:
        if not isinstance(value, Value):
            raise InvalidArgument(f"Cannot encode object of type {type(value).__name__}, build a Value first")

        kind = value.kind
        if kind is Kind.INTEGER:
            BencodeEncoder._encode_int(value.as_integer(), out)
        elif kind is Kind.BYTES:
            BencodeEncoder._encode_bytes(value.as_bytes(), out)
        elif kind is Kind.LIST:
            BencodeEncoder._encode_list(value, out)
        elif kind is Kind.DICT:
            BencodeEncoder._encode_dict(value, out)
        else:
            raise InvalidArgument("Kind.NONE is not a valid value therefore it cannot be encoded")

    @staticmethod
    def _encode_int(number: int, out: bytearray) -> None:
        out += f"i{number}e".encode('ascii')

    @staticmethod
    def _encode_bytes(data: bytes, out: bytearray) -> None:
        out += f"{len(data)}:".encode('ascii')
        out += data

    @staticmethod
    def _encode_list(value: Value, out: bytearray) -> None:
        out += b'l'
        for item in value:
            BencodeEncoder._encode_into(item, out)
        out += b'e'

    @staticmethod
    def _encode_dict(value: Value, out: bytearray) -> None:
        # Keys come back sorted byte-lexicographically, which makes the output canonical
        out += b'd'
        for key, item in value.items():
            BencodeEncoder._encode_bytes(key, out)
            BencodeEncoder._encode_into(item, out)
        out += b'e'


def encode(value: Value) -> bytes:
    """Helper function to encode a value tree to bencode format"""
    return BencodeEncoder.encode(value)
