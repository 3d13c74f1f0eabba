"""
Terraform Importer Module.

Runs `terraform init` once and `terraform import` for each queue. Each import
is independent: a failure is logged with its exit code and the remaining queues
are still imported. Nothing is rolled back.
"""

import subprocess
from dataclasses import asdict, dataclass
from typing import List

from ..config import Config
from ..utils import setup_logging
from .queues import QueueDescriptor
from .types import ImportDetail

logger = setup_logging()

# Exit codes reported when the terraform binary cannot be started
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


@dataclass
class ImportResult:
    """Outcome of one `terraform import`."""

    queue_name: str
    address: str
    import_id: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> ImportDetail:
        detail: ImportDetail = dict(asdict(self))
        detail["success"] = self.success
        return detail


def run_terraform(config: Config, args: List[str]) -> int:
    """
    Run a terraform command in the working directory.

    Output is streamed to the console. Returns the process exit code.
    """
    command = [config.terraform_bin] + args
    logger.debug(f"Running: {' '.join(command)}")
    try:
        completed = subprocess.run(command, cwd=config.working_dir, check=False)
    except FileNotFoundError:
        logger.error(f"Terraform binary not found: {config.terraform_bin}")
        return COMMAND_NOT_FOUND
    except PermissionError:
        logger.error(f"Terraform binary is not executable: {config.terraform_bin}")
        return COMMAND_NOT_EXECUTABLE
    except OSError as e:
        logger.error(f"Could not run {config.terraform_bin}: {e}")
        return COMMAND_NOT_FOUND
    return completed.returncode


def terraform_init(config: Config) -> int:
    """Run `terraform init`. A failure is logged but does not stop the run."""
    if config.dry_run:
        logger.info("[dry-run] terraform init -input=false")
        return 0
    logger.info("Running terraform init...")
    exit_code = run_terraform(config, ["init", "-input=false"])
    if exit_code != 0:
        logger.warning(f"terraform init failed with exit code: {exit_code}")
    return exit_code


def import_queue(config: Config, queue: QueueDescriptor) -> ImportResult:
    """Import one queue into the state of its generated module."""
    import_id = queue.import_id(config.region)
    logger.info(f"Importing: {queue.name}")
    logger.info(f"  Module: {queue.module_address}")
    logger.info(f"  URL: {import_id}")

    if config.dry_run:
        logger.info(f"[dry-run] terraform import -input=false {queue.module_address} {import_id}")
        exit_code = 0
    else:
        exit_code = run_terraform(
            config, ["import", "-input=false", queue.module_address, import_id]
        )

    result = ImportResult(
        queue_name=queue.name,
        address=queue.module_address,
        import_id=import_id,
        exit_code=exit_code,
    )
    if result.success:
        logger.info("  Import successful")
    else:
        logger.error(f"  Import failed with exit code: {exit_code}")
    return result


def import_all(config: Config, queues: List[QueueDescriptor]) -> List[ImportResult]:
    """Import every queue in order, continuing past failures."""
    return [import_queue(config, queue) for queue in queues]
