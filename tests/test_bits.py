#!/usr/bin/env python3
import unittest

from mapper.bits import check_width, group_size, is_unsigned, max_unsigned, to_signed, wrap_unsigned
from mapper.errors import ConfigurationError


class TestBits(unittest.TestCase):
    def test_group_size_and_max(self):
        self.assertEqual(group_size(8), 256)
        self.assertEqual(max_unsigned(8), 255)
        self.assertEqual(group_size(64), 2**64)
        self.assertEqual(max_unsigned(1), 1)

    def test_wrap_unsigned(self):
        self.assertEqual(wrap_unsigned(300, 8), 44)
        self.assertEqual(wrap_unsigned(-1, 8), 255)
        self.assertEqual(wrap_unsigned(-150, 16), 2**16 - 150)
        self.assertEqual(wrap_unsigned(2**64 + 5, 64), 5)

    def test_to_signed(self):
        self.assertEqual(to_signed(150, 8), -106)
        self.assertEqual(to_signed(127, 8), 127)
        self.assertEqual(to_signed(128, 8), -128)
        self.assertEqual(to_signed(255, 8), -1)
        self.assertEqual(to_signed(2**63, 64), -2**63)
        self.assertEqual(to_signed(1, 1), -1)
        self.assertEqual(to_signed(0, 1), 0)

    def test_to_signed_masks_high_bits(self):
        # only the low byte counts
        self.assertEqual(to_signed(0x1FF, 8), -1)
        self.assertEqual(to_signed(0x17F, 8), 127)

    def test_signed_roundtrip_through_wrap(self):
        for width in (8, 16, 32):
            for v in (-(2 ** (width - 1)), -1, 0, 1, 2 ** (width - 1) - 1):
                self.assertEqual(to_signed(wrap_unsigned(v, width), width), v)

    def test_is_unsigned(self):
        self.assertTrue(is_unsigned(0, 8))
        self.assertTrue(is_unsigned(255, 8))
        self.assertFalse(is_unsigned(256, 8))
        self.assertFalse(is_unsigned(-1, 8))
        self.assertFalse(is_unsigned(1.0, 8))
        self.assertFalse(is_unsigned(True, 8))

    def test_check_width(self):
        self.assertEqual(check_width(16), 16)
        for bad in (0, -1, 1.5, True, None):
            with self.assertRaises(ConfigurationError):
                check_width(bad)


if __name__ == '__main__':
    unittest.main()
