"""
Unit tests for the pool configuration.

Tests default values, validation and YAML loading.
"""

import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from pool_runner.config.pool_config import DEFAULT_CONFIG_PATH, PoolConfig, get_pool_config


class TestPoolConfig(unittest.TestCase):
    """Test the PoolConfig model."""

    def test_defaults(self):
        """Test the demo defaults."""
        config = PoolConfig()

        self.assertEqual(config.name, "pool-1")
        self.assertEqual(config.capacity, 5)
        self.assertEqual(config.task_count, 10)
        self.assertEqual(config.work_duration_ms, 2000)
        self.assertEqual(config.log_level, "INFO")

    def test_validation(self):
        """Test invalid values are rejected."""
        with self.assertRaises(ValidationError):
            PoolConfig(capacity=0)
        with self.assertRaises(ValidationError):
            PoolConfig(task_count=-1)
        with self.assertRaises(ValidationError):
            PoolConfig(work_duration_ms=-5)
        with self.assertRaises(ValidationError):
            PoolConfig(log_level="LOUD")

    def test_log_level_normalised(self):
        """Test log levels are upper-cased."""
        self.assertEqual(PoolConfig(log_level="debug").log_level, "DEBUG")


class TestGetPoolConfig(unittest.TestCase):
    """Test loading configuration files."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_packaged_defaults(self):
        """Test the packaged file matches the model defaults."""
        self.assertTrue(DEFAULT_CONFIG_PATH.exists())
        self.assertEqual(get_pool_config(), PoolConfig())

    def test_custom_file(self):
        """Test values are read from a given file."""
        path = self.config_dir / "pool.yaml"
        path.write_text("capacity: 2\ntask_count: 4\nwork_duration_ms: 50\n")

        config = get_pool_config(path)

        self.assertEqual(config.capacity, 2)
        self.assertEqual(config.task_count, 4)
        self.assertEqual(config.work_duration_ms, 50)
        self.assertEqual(config.name, "pool-1")  # default value

    def test_empty_file(self):
        """Test an empty file yields the defaults."""
        path = self.config_dir / "empty.yaml"
        path.write_text("")
        self.assertEqual(get_pool_config(str(path)), PoolConfig())

    def test_missing_file(self):
        """Test a missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            get_pool_config(self.config_dir / "missing.yaml")

    def test_invalid_value(self):
        """Test invalid values in the file raise ValidationError."""
        path = self.config_dir / "bad.yaml"
        path.write_text("capacity: 0\n")
        with self.assertRaises(ValidationError):
            get_pool_config(path)


if __name__ == "__main__":
    unittest.main()
