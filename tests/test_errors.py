import os
import unittest
from unittest import mock

from bitmask import BitmaskCodec, InvalidIdentifier, encode, has_bit, load_codec, toggle_bit


class TestInvalidIdentifier(unittest.TestCase):
    def setUp(self):
        self.codec = BitmaskCodec(32)

    def test_negative_identifier(self):
        with self.assertRaises(InvalidIdentifier) as ctx:
            self.codec.encode([1, -1])
        self.assertEqual(ctx.exception.identifier, -1)
        self.assertEqual(ctx.exception.width, 32)
        self.assertIn("negative", str(ctx.exception))

    def test_identifier_at_width(self):
        with self.assertRaises(InvalidIdentifier) as ctx:
            self.codec.encode([32])
        self.assertIn("32", str(ctx.exception))
        self.assertEqual(encode([32]), 1 << 32)

    def test_default_codec_rejects_64(self):
        with self.assertRaises(InvalidIdentifier):
            encode([64])
        with self.assertRaises(InvalidIdentifier):
            has_bit(0, 64)
        with self.assertRaises(InvalidIdentifier):
            toggle_bit(0, -1)

    def test_non_integer_identifiers(self):
        for bad in (1.0, "3", None, True):
            with self.subTest(identifier=bad):
                with self.assertRaises(InvalidIdentifier) as ctx:
                    self.codec.has_bit(42, bad)
                self.assertIn("not an integer", ctx.exception.reason)

    def test_point_operations_validate(self):
        with self.assertRaises(InvalidIdentifier):
            self.codec.has_bit(42, 40)
        with self.assertRaises(InvalidIdentifier):
            self.codec.toggle_bit(42, 32)

    def test_is_value_error(self):
        with self.assertRaises(ValueError):
            self.codec.toggle_bit(0, 99)

    def test_rejection_is_logged(self):
        with self.assertLogs("bitmask.codec", level="DEBUG") as logs:
            with self.assertRaises(InvalidIdentifier):
                self.codec.encode([99])
        self.assertTrue(any("99" in line for line in logs.output))


class TestLoadCodec(unittest.TestCase):
    def test_explicit_width(self):
        with mock.patch.dict(os.environ, {"BITMASK_WIDTH": "64"}):
            self.assertEqual(load_codec(32).capacity, 32)

    def test_env_width(self):
        with mock.patch.dict(os.environ, {"BITMASK_WIDTH": "32"}):
            self.assertEqual(load_codec().capacity, 32)

    def test_default_width(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(load_codec().capacity, 64)

    def test_invalid_env_width_falls_back(self):
        with mock.patch.dict(os.environ, {"BITMASK_WIDTH": "16"}):
            with self.assertLogs("bitmask", level="WARNING"):
                codec = load_codec()
        self.assertEqual(codec.capacity, 64)


if __name__ == "__main__":
    unittest.main()
