"""
Tests for configuration module.
"""

import unittest
from pathlib import Path
from unittest.mock import patch

from src.config import Config, load_config


class TestConfig(unittest.TestCase):
    """Test configuration loading and validation."""

    @patch.dict("os.environ", {}, clear=True)
    def test_load_config_defaults(self) -> None:
        """Test configuration loading without any overrides."""
        config = load_config()
        self.assertIsInstance(config, Config)
        self.assertEqual(config.region, "us-east-1")
        self.assertEqual(config.module_name, "sqs")
        self.assertEqual(config.module_calls_file, "main.tf")
        self.assertEqual(config.outputs_file, "output.tf")
        self.assertEqual(config.log_level, "INFO")
        self.assertFalse(config.dry_run)

    @patch.dict("os.environ", {"AWS_REGION": "eu-west-2"}, clear=True)
    def test_aws_region_does_not_change_default(self) -> None:
        """Test that the SDK's AWS_REGION is not used as the scan region."""
        self.assertEqual(load_config().region, "us-east-1")

    @patch.dict("os.environ", {"SQS_IMPORT_REGION": "eu-west-2"}, clear=True)
    def test_region_from_environment(self) -> None:
        """Test that SQS_IMPORT_REGION is used when no region is given."""
        self.assertEqual(load_config().region, "eu-west-2")

    @patch.dict("os.environ", {"SQS_IMPORT_REGION": "eu-west-2"}, clear=True)
    def test_explicit_region_wins(self) -> None:
        """Test that an explicit region overrides SQS_IMPORT_REGION."""
        self.assertEqual(load_config(region="ap-southeast-1").region, "ap-southeast-1")

    @patch.dict("os.environ", {}, clear=True)
    def test_invalid_region(self) -> None:
        """Test that a malformed region raises ValueError."""
        with self.assertRaises(ValueError) as context:
            load_config(region="not a region")
        self.assertIn("Invalid AWS region", str(context.exception))

    @patch.dict("os.environ", {"LOG_LEVEL": "verbose"}, clear=True)
    def test_invalid_log_level(self) -> None:
        """Test that an unknown log level raises ValueError."""
        with self.assertRaises(ValueError) as context:
            load_config()
        self.assertIn("LOG_LEVEL", str(context.exception))

    @patch.dict("os.environ", {}, clear=True)
    def test_same_target_files_rejected(self) -> None:
        """Test that module calls and outputs cannot share a file."""
        with self.assertRaises(ValueError):
            load_config(module_calls_file="sqs.tf", outputs_file="./sqs.tf")

    @patch.dict("os.environ", {}, clear=True)
    def test_same_target_files_rejected_across_absolute_paths(self) -> None:
        """Test that an absolute path and a relative path to one file are rejected."""
        with self.assertRaises(ValueError):
            load_config(working_dir="/tf", module_calls_file="/tf/main.tf", outputs_file="main.tf")
        with self.assertRaises(ValueError):
            load_config(working_dir="/tf", module_calls_file="main.tf", outputs_file="../tf/main.tf")

    @patch.dict(
        "os.environ",
        {
            "LOG_LEVEL": "debug",
            "SQS_MODULE_NAME": "queues",
            "SQS_MODULES_DIR": "infra/modules",
            "SQS_MODULE_CALLS_FILE": "sqs.tf",
            "SQS_OUTPUTS_FILE": "sqs_outputs.tf",
            "TERRAFORM_BIN": "tofu",
        },
        clear=True,
    )
    def test_load_config_with_optional_values(self) -> None:
        """Test configuration loading with optional values."""
        config = load_config()
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.module_name, "queues")
        self.assertEqual(config.module_source, "./infra/modules/queues")
        self.assertEqual(config.module_calls_file, "sqs.tf")
        self.assertEqual(config.outputs_file, "sqs_outputs.tf")
        self.assertEqual(config.terraform_bin, "tofu")

    def test_paths_resolve_against_working_dir(self) -> None:
        """Test that relative paths are resolved against the working directory."""
        config = Config(working_dir="/tf/root")
        self.assertEqual(config.module_calls_path, Path("/tf/root/main.tf"))
        self.assertEqual(config.outputs_path, Path("/tf/root/output.tf"))
        self.assertEqual(config.module_dir, Path("/tf/root/modules/sqs"))
        self.assertEqual(config.module_source, "./modules/sqs")

    def test_absolute_modules_dir_source_is_relative(self) -> None:
        """Test that an absolute modules directory becomes a relative module source."""
        config = Config(working_dir="/tf/root", modules_dir="/tf/shared")
        self.assertEqual(config.module_source, "./../shared/sqs")


if __name__ == "__main__":
    unittest.main()
