import os
import unittest
from unittest import mock

from helpers import fixed_generator  # noqa: F401  (ajusta sys.path)

from tetris_stack.config import QUEUE_CAPACITY, Settings


class SettingsTestCase(unittest.TestCase):
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings.from_env()
        self.assertEqual(settings.queue_capacity, QUEUE_CAPACITY)
        self.assertIsNone(settings.rng_seed)
        self.assertEqual(settings.log_level, "WARNING")

    @mock.patch.dict(
        os.environ,
        {"TETRIS_QUEUE_CAPACITY": "8", "TETRIS_RNG_SEED": "99", "TETRIS_LOG_LEVEL": "debug"},
        clear=True,
    )
    def test_from_environment(self):
        settings = Settings.from_env()
        self.assertEqual(settings.queue_capacity, 8)
        self.assertEqual(settings.rng_seed, 99)
        self.assertEqual(settings.log_level, "DEBUG")

    @mock.patch.dict(os.environ, {"TETRIS_RNG_SEED": ""}, clear=True)
    def test_empty_seed_means_random(self):
        self.assertIsNone(Settings.from_env().rng_seed)

    @mock.patch.dict(os.environ, {"TETRIS_QUEUE_CAPACITY": "cinco"}, clear=True)
    def test_malformed_capacity(self):
        with self.assertRaises(ValueError):
            Settings.from_env()

    @mock.patch.dict(os.environ, {"TETRIS_QUEUE_CAPACITY": "0"}, clear=True)
    def test_zero_capacity(self):
        with self.assertRaises(ValueError):
            Settings.from_env()

    @mock.patch.dict(os.environ, {"TETRIS_LOG_LEVEL": "verbose"}, clear=True)
    def test_unknown_log_level(self):
        with self.assertRaises(ValueError):
            Settings.from_env()


if __name__ == "__main__":
    unittest.main()
