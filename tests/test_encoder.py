# tests/test_encoder.py
import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from bencodec import (
    Kind, Value, Integer, ByteString, List, Dict,
    decode, encode, InvalidArgument,
)

# Well-formed inputs, some of them non-canonical
SAMPLES = [
    b'i0e',
    b'i-42e',
    b'0:',
    b'4:spam',
    b'le',
    b'de',
    b'li1ei2ee',
    b'd3:bar4:spam3:fooi42ee',
    b'd3:fooi1e3:bari2ee',
    b'd4:spamli-42e4:spamee',
    b'd1:bd1:zi1e1:ai2ee1:al0:lleeee',
    b'd8:announce19:http://tracker:80804:infod6:lengthi1048576e4:name4:test'
    b'12:piece lengthi262144e6:pieces20:\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09'
    b'\x0a\x0b\x0c\x0d\x0e\x0f\x10\x11\x12\x13ee',
]


class TestEncode(unittest.TestCase):
    def test_encode_integer(self):
        self.assertEqual(encode(Integer(3)), b'i3e')
        self.assertEqual(encode(Integer(-42)), b'i-42e')
        self.assertEqual(encode(Integer(0)), b'i0e')
        self.assertEqual(encode(Integer(-(2 ** 63))), b'i-9223372036854775808e')

    def test_encode_string(self):
        self.assertEqual(encode(ByteString(b'spam')), b'4:spam')
        self.assertEqual(encode(ByteString(b'')), b'0:')
        self.assertEqual(encode(ByteString(b'\x00\xff')), b'2:\x00\xff')

    def test_encode_list(self):
        self.assertEqual(encode(List()), b'le')
        self.assertEqual(encode(List([b'spam', b'eggs'])), b'l4:spam4:eggse')
        self.assertEqual(encode(List([1, 2, 1])), b'li1ei2ei1ee')

    def test_encode_dict(self):
        self.assertEqual(encode(Dict()), b'de')
        self.assertEqual(encode(Dict({b'cow': b'moo', b'spam': b'eggs'})), b'd3:cow3:moo4:spam4:eggse')

    def test_dict_keys_are_sorted_by_byte_value(self):
        table = Dict()
        for key in (b'foo', b'bar', b'Foo', b'\xff', b'ba', b''):
            table.field_set(key, 0)
        self.assertEqual(
            encode(table),
            b'd0:i0e3:Fooi0e2:bai0e3:bari0e3:fooi0e1:\xffi0ee'
        )

    def test_build_and_encode(self):
        table = Value.new(Kind.DICT)
        table.field_set(b'spam', Value.new(Kind.LIST))
        table.field(b'spam').append(-42)
        table.field(b'spam').append(Value.from_bytes(b'spam'))
        self.assertEqual(encode(table), b'd4:spamli-42e4:spamee')

    def test_none_cannot_be_encoded(self):
        with self.assertRaises(InvalidArgument) as context:
            encode(Value())
        self.assertIn("cannot be encoded", str(context.exception))

    def test_nested_none_cannot_be_encoded(self):
        with self.assertRaises(InvalidArgument):
            encode(List([Integer(1), Value()]))
        with self.assertRaises(InvalidArgument):
            encode(Dict({b'a': Dict({b'b': Value()})}))

    def test_native_objects_are_rejected(self):
        with self.assertRaises(InvalidArgument):
            encode(42)
        with self.assertRaises(InvalidArgument):
            encode({b'a': 1})


class TestRoundTrip(unittest.TestCase):
    def test_decode_of_encode_is_identity(self):
        values = [
            Integer(0), Integer(-1), Integer(2 ** 63 - 1),
            ByteString(b''), ByteString(bytes(range(256))),
            List(), List([1, b'a', List([Dict()])]),
            Dict({b'z': List([1, 2]), b'a': Dict({b'': b''}), b'\x80': -5}),
        ]
        for value in values:
            with self.subTest(value=value):
                self.assertEqual(decode(encode(value)), value)

    def test_canonical_re_encoding(self):
        for data in SAMPLES:
            with self.subTest(data=data):
                once = encode(decode(data))
                self.assertEqual(encode(decode(once)), once)

    def test_canonical_input_is_unchanged(self):
        self.assertEqual(encode(decode(b'd3:bar4:spam3:fooi42ee')), b'd3:bar4:spam3:fooi42ee')

    def test_unsorted_input_is_sorted(self):
        self.assertEqual(encode(decode(b'd3:fooi1e3:bari2ee')), b'd3:bari2e3:fooi1ee')
        self.assertEqual(
            encode(decode(b'd1:bd1:zi1e1:ai2ee1:al0:lleeee')),
            b'd1:al0:lleee1:bd1:ai2e1:zi1eee'
        )

    def test_lenient_forms_become_canonical(self):
        self.assertEqual(encode(decode(b'i-0e')), b'i0e')
        self.assertEqual(encode(decode(b'i007e')), b'i7e')
        self.assertEqual(encode(decode(b'03:abc')), b'3:abc')


if __name__ == '__main__':
    unittest.main()
