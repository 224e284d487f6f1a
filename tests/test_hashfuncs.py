import hashlib
import unittest

from hashfuncs import F, PRF, core_hash
from params import WOTSP_SHA2_256, WOTSP_SHA2_512, WOTSP_SHAKE_256, WOTSP_SHAKE_512


class TestHashCore(unittest.TestCase):
    def test_prf_layout(self):
        """
        GIVEN a key and a 32-byte input.
        WHEN PRF is computed with SHA2-256.
        THEN it hashes toByte(3, 32) || key || input.
        """
        key = bytes(range(32))
        data = bytes(range(32, 64))
        expected = hashlib.sha256(b"\x00" * 31 + b"\x03" + key + data).digest()
        self.assertEqual(PRF(key, data, WOTSP_SHA2_256), expected)

    def test_f_layout(self):
        key = b"\x11" * 64
        x = b"\x22" * 64
        expected = hashlib.sha512(b"\x00" * 64 + key + x).digest()
        self.assertEqual(F(key, x, WOTSP_SHA2_512), expected)

    def test_prf_and_f_are_separated(self):
        key = b"\x01" * 32
        data = b"\x02" * 32
        self.assertNotEqual(PRF(key, data, WOTSP_SHA2_256), F(key, data, WOTSP_SHA2_256))

    def test_output_widths(self):
        for p in (WOTSP_SHA2_256, WOTSP_SHA2_512, WOTSP_SHAKE_256, WOTSP_SHAKE_512):
            self.assertEqual(len(core_hash(b"abc", p)), p.n)

    def test_shake_family(self):
        self.assertEqual(core_hash(b"abc", WOTSP_SHAKE_256), hashlib.shake_128(b"abc").digest(32))
        self.assertEqual(core_hash(b"abc", WOTSP_SHAKE_512), hashlib.shake_256(b"abc").digest(64))

    def test_width_mismatch(self):
        with self.assertRaises(ValueError):
            PRF(b"\x00" * 64, b"\x00" * 32, WOTSP_SHA2_256)
        with self.assertRaises(ValueError):
            PRF(b"\x00" * 32, b"\x00" * 31, WOTSP_SHA2_256)
        with self.assertRaises(ValueError):
            F(b"\x00" * 32, b"\x00" * 64, WOTSP_SHA2_256)


if __name__ == '__main__':
    unittest.main()
