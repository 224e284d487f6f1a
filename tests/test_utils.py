import unittest

from utils import base_w, ceil_div, from_bytes, lg_w, to_bytes, xor_bytes


class TestToBytes(unittest.TestCase):
    def test_big_endian(self):
        self.assertEqual(to_bytes(0x01020304, 4), b"\x01\x02\x03\x04")
        self.assertEqual(to_bytes(3, 32), b"\x00" * 31 + b"\x03")
        self.assertEqual(from_bytes(b"\x01\x02\x03\x04"), 0x01020304)

    def test_rejects_negative_and_overflow(self):
        with self.assertRaises(ValueError):
            to_bytes(-1, 4)
        with self.assertRaises(ValueError):
            to_bytes(1 << 32, 4)


class TestHelpers(unittest.TestCase):
    def test_xor_bytes(self):
        self.assertEqual(xor_bytes(b"\x0f\xf0", b"\xff\xff"), b"\xf0\x0f")
        with self.assertRaises(ValueError):
            xor_bytes(b"\x00", b"\x00\x00")

    def test_ceil_div_and_lg_w(self):
        self.assertEqual(ceil_div(12, 8), 2)
        self.assertEqual(ceil_div(16, 8), 2)
        self.assertEqual(lg_w(16), 4)
        self.assertEqual(lg_w(4), 2)
        with self.assertRaises(ValueError):
            lg_w(8)


class TestBaseW(unittest.TestCase):
    def test_nibbles_high_first(self):
        """
        GIVEN the bytes 0x12 0x34.
        WHEN they are read as base-16 digits.
        THEN the high nibble of each byte comes first.
        """
        self.assertEqual(base_w(b"\x12\x34", 16, 4), [1, 2, 3, 4])

    def test_partial_output(self):
        self.assertEqual(base_w(b"\x12\x34", 16, 3), [1, 2, 3])

    def test_base_4(self):
        self.assertEqual(base_w(b"\x1b", 4, 4), [0, 1, 2, 3])

    def test_out_len_too_large(self):
        with self.assertRaises(ValueError):
            base_w(b"\x12", 16, 3)


if __name__ == '__main__':
    unittest.main()
