import unittest
from dataclasses import FrozenInstanceError

from srpkit.crypto.SRPKey import SRPKey


class TestSRPKey(unittest.TestCase):
    """Byte/number dual view of SRP values."""

    def test_from_bytes_keeps_bytes(self) -> None:
        """Raw bytes, including leading zeros, are kept verbatim."""
        key = SRPKey(b"\x00\x01\x02")
        self.assertEqual(key.data, b"\x00\x01\x02")
        self.assertEqual(bytes(key), b"\x00\x01\x02")
        self.assertEqual(len(key), 3)
        self.assertEqual(key.number, 0x0102)

    def test_from_bytearray_is_copied(self) -> None:
        """Mutable input is frozen into bytes at construction."""
        source = bytearray(b"\x05\x06")
        key = SRPKey(source)
        source[0] = 0xFF

        self.assertIsInstance(key.data, bytes)
        self.assertEqual(key.data, b"\x05\x06")

    def test_from_number_minimal_big_endian(self) -> None:
        """Integers serialise to minimal big-endian bytes."""
        self.assertEqual(SRPKey.from_number(0x010203).data, b"\x01\x02\x03")
        self.assertEqual(SRPKey.from_number(255).data, b"\xff")
        self.assertEqual(SRPKey.from_number(256).data, b"\x01\x00")

    def test_number_round_trips_through_bytes(self) -> None:
        """from_number(n).number == n."""
        for value in (1, 2, 65537, 2**160 + 7):
            with self.subTest(value=value):
                self.assertEqual(SRPKey.from_number(value).number, value)

    def test_number_of_empty_key_fails(self) -> None:
        """An empty byte sequence is not a number."""
        with self.assertRaises(ValueError):
            SRPKey(b"").number

    def test_negative_number_rejected(self) -> None:
        """SRP values are non-negative."""
        with self.assertRaises(ValueError):
            SRPKey.from_number(-1)

    def test_non_bytes_rejected(self) -> None:
        """Strings and ints are not accepted as raw key material."""
        with self.assertRaises(TypeError):
            SRPKey("0102")
        with self.assertRaises(TypeError):
            SRPKey(5)
        with self.assertRaises(TypeError):
            SRPKey.from_number(b"\x01")

    def test_key_is_immutable(self) -> None:
        """Keys cannot be rebound after construction."""
        key = SRPKey(b"\x01")
        with self.assertRaises(FrozenInstanceError):
            key.data = b"\x02"

    def test_equality_and_hex(self) -> None:
        """Keys compare by bytes and render as upper-case hex."""
        self.assertEqual(SRPKey(b"\xab\xcd"), SRPKey.from_number(0xABCD))
        self.assertNotEqual(SRPKey(b"\x00\xab"), SRPKey(b"\xab"))
        self.assertEqual(SRPKey(b"\xab\xcd").hex(), "ABCD")


if __name__ == "__main__":
    unittest.main()
