"""
Configuration loader for the SQS Terraform Importer.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_REGION = "us-east-1"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

REGION_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")
MODULE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass
class Config:
    """Configuration class for the importer."""

    region: str = DEFAULT_REGION
    module_name: str = "sqs"
    modules_dir: str = "modules"
    module_calls_file: str = "main.tf"
    outputs_file: str = "output.tf"
    working_dir: str = "."
    terraform_bin: str = "terraform"
    profile: Optional[str] = None
    dry_run: bool = False
    log_level: str = "INFO"

    def resolve(self, path: str) -> Path:
        """Resolve a configured path against the working directory."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return Path(self.working_dir) / candidate

    @property
    def module_dir(self) -> Path:
        return self.resolve(self.modules_dir) / self.module_name

    @property
    def module_source(self) -> str:
        """Module source path as written into the module calls."""
        modules_dir = Path(self.modules_dir)
        if modules_dir.is_absolute():
            modules_dir = Path(os.path.relpath(modules_dir, self.working_dir))
        return f"./{(modules_dir / self.module_name).as_posix()}"

    @property
    def module_calls_path(self) -> Path:
        return self.resolve(self.module_calls_file)

    @property
    def outputs_path(self) -> Path:
        return self.resolve(self.outputs_file)


def _absolute(working_dir: str, path: str) -> str:
    return os.path.abspath(os.path.join(working_dir, path))


def load_config(
    region: Optional[str] = None,
    module_name: Optional[str] = None,
    modules_dir: Optional[str] = None,
    module_calls_file: Optional[str] = None,
    outputs_file: Optional[str] = None,
    working_dir: Optional[str] = None,
    terraform_bin: Optional[str] = None,
    profile: Optional[str] = None,
    dry_run: bool = False,
    log_level: Optional[str] = None,
) -> Config:
    """
    Loads and validates configuration for the importer.

    Explicit arguments (usually from the command line) take precedence over
    environment variables, which take precedence over the defaults.

    Returns:
        Config object with validated settings

    Raises:
        ValueError: If a setting is missing or invalid
    """
    region = region or os.environ.get("SQS_IMPORT_REGION") or DEFAULT_REGION
    if not REGION_PATTERN.match(region):
        raise ValueError(f"Invalid AWS region: {region!r}")

    log_level = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {log_level!r}"
        )

    module_name = module_name or os.environ.get("SQS_MODULE_NAME", "sqs")
    if not MODULE_NAME_PATTERN.match(module_name):
        raise ValueError(f"Invalid module name: {module_name!r}")

    modules_dir = modules_dir or os.environ.get("SQS_MODULES_DIR", "modules")
    module_calls_file = module_calls_file or os.environ.get(
        "SQS_MODULE_CALLS_FILE", "main.tf"
    )
    outputs_file = outputs_file or os.environ.get("SQS_OUTPUTS_FILE", "output.tf")
    working_dir = working_dir or os.environ.get("SQS_IMPORT_WORKING_DIR", ".")
    if _absolute(working_dir, module_calls_file) == _absolute(working_dir, outputs_file):
        raise ValueError("Module calls file and outputs file must be different files")

    return Config(
        region=region,
        module_name=module_name,
        modules_dir=modules_dir,
        module_calls_file=module_calls_file,
        outputs_file=outputs_file,
        working_dir=working_dir,
        terraform_bin=terraform_bin or os.environ.get("TERRAFORM_BIN", "terraform"),
        profile=profile or os.environ.get("AWS_PROFILE") or None,
        dry_run=dry_run,
        log_level=log_level,
    )
