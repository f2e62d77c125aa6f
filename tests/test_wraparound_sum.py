#!/usr/bin/env python3
"""Encodings add modulo the group size; the signed decoding of a sum recovers the real sum."""
import random
import unittest

from mapper.number_mapper import FixedPointMapper
from mapper.throttle import EveryMs


class TestWraparoundSum(unittest.TestCase):
    def test_three_party_sum(self):
        rng = random.Random(123)
        width, divisor = 32, 2**12
        m = FixedPointMapper(width, divisor, throttle=EveryMs(500))
        q = m.group_size
        dim = 50
        v1 = [rng.uniform(-100, 100) for _ in range(dim)]
        v2 = [rng.uniform(-100, 100) for _ in range(dim)]
        v3 = [rng.uniform(-100, 100) for _ in range(dim)]
        e1, e2, e3 = m.encode_many(v1), m.encode_many(v2), m.encode_many(v3)
        summed = [(e1[i] + e2[i] + e3[i]) % q for i in range(dim)]
        dec = m.decode_signed_many(summed)
        for i in range(dim):
            # each truncation loses < 1/divisor
            self.assertLess(abs(dec[i] - (v1[i] + v2[i] + v3[i])), 3.0 / divisor)

    def test_random_masks_cancel(self):
        rng = random.Random(7)
        m = FixedPointMapper(16, 100, throttle=EveryMs(500))
        q = m.group_size
        x = m.encode(-2.5)
        r = rng.randrange(0, q)
        masked = (x + r) % q
        self.assertEqual(m.decode_signed((masked - r) % q), -2.5)


if __name__ == '__main__':
    unittest.main()
