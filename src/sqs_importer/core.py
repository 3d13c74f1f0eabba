"""
Core import orchestration logic.

This module contains the main entry point of the importer and runs the
pipeline in order: module template, discovery, stale block removal, rendering
and finally `terraform init` / `terraform import`.
"""

from collections import OrderedDict
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..config import Config
from ..utils import setup_logging, write_text_file
from .fetchers import fetch_queue_attributes, fetch_queue_tags, get_sqs_client, list_queue_urls
from .importer import import_all, terraform_init
from .managed_regions import (
    MODULE_CALLS_BEGIN,
    MODULE_CALLS_END,
    OUTPUTS_BEGIN,
    OUTPUTS_END,
    append_region,
    remove_module_calls,
    remove_queue_outputs,
    render_region,
    strip_file,
)
from .queues import QueueDescriptor, parse_queue_settings
from .renderers import render_module_call, render_queue_outputs, write_module
from .types import RunReport, SQSClient

logger = setup_logging()


class NoQueuesFoundError(ValueError):
    """Raised when discovery returns no queues for the region."""


def build_descriptors(queue_urls: List[str]) -> List[QueueDescriptor]:
    """
    Build queue descriptors in discovery order, one per safe identifier.

    When two queues map to the same identifier the later one replaces the
    earlier one and a warning is logged.
    """
    descriptors: "OrderedDict[str, QueueDescriptor]" = OrderedDict()
    for queue_url in queue_urls:
        try:
            queue = QueueDescriptor.from_url(queue_url)
        except ValueError as e:
            logger.warning(f"Skipping queue: {e}")
            continue
        existing = descriptors.get(queue.resource_name)
        if existing is not None:
            logger.warning(
                f"Queues {existing.name} and {queue.name} both map to "
                f"{queue.module_name}; keeping {queue.name}"
            )
        descriptors[queue.resource_name] = queue
    return list(descriptors.values())


def render_queue_blocks(
    sqs_client: SQSClient, queues: List[QueueDescriptor], module_source: str
) -> Dict[str, List[str]]:
    """Fetch settings and tags for each queue and render its blocks."""
    module_calls: List[str] = []
    outputs: List[str] = []
    for queue in queues:
        logger.info(f"Processing: {queue.name}")
        settings = parse_queue_settings(fetch_queue_attributes(sqs_client, queue.url))
        tags = fetch_queue_tags(sqs_client, queue.url)
        logger.debug(f"[SQS] {queue.name}: settings={settings}, tags={tags}")
        module_calls.append(render_module_call(queue, settings, tags, module_source))
        outputs.append(render_queue_outputs(queue))
    return {"module_calls": module_calls, "outputs": outputs}


def import_queues(
    config: Config,
    sqs_client: Optional[SQSClient] = None,
    generated_at: Optional[str] = None,
) -> RunReport:
    """
    Main entry point of the importer. Orchestrates the whole run.

    This function:
    - Writes the SQS module template
    - Lists the queues in the configured region
    - Removes blocks generated by a previous run
    - Renders a module call and two outputs per queue
    - Runs terraform init and imports each queue

    Args:
        config: Validated configuration
        sqs_client: SQS client to use (created from the config if omitted)
        generated_at: Timestamp written into the region markers

    Returns:
        Dictionary describing the run, including one entry per import

    Raises:
        NoQueuesFoundError: If no queues exist in the region
    """
    # Step 1: Write the module template
    write_module(config.module_dir)

    # Step 2: Discover queues
    if sqs_client is None:
        sqs_client = get_sqs_client(config.region, config.profile)
    logger.info(f"Fetching SQS queues from region: {config.region}...")
    queues = build_descriptors(list_queue_urls(sqs_client))
    if not queues:
        logger.error(f"No queues found in region {config.region}")
        raise NoQueuesFoundError(f"No queues found in region {config.region}")
    logger.info(f"Found {len(queues)} queue(s)")

    # Step 3: Remove blocks from the previous run
    module_calls_text = strip_file(config.module_calls_path, remove_module_calls)
    outputs_text = strip_file(config.outputs_path, remove_queue_outputs)

    # Step 4: Render and write the new blocks
    if generated_at is None:
        generated_at = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    blocks = render_queue_blocks(sqs_client, queues, config.module_source)

    module_calls_region = render_region(
        MODULE_CALLS_BEGIN, MODULE_CALLS_END, blocks["module_calls"], generated_at
    )
    write_text_file(
        config.module_calls_path, append_region(module_calls_text, module_calls_region), logger
    )
    logger.info(f"Module calls added to {config.module_calls_path} (replaced old ones)")

    outputs_region = render_region(OUTPUTS_BEGIN, OUTPUTS_END, blocks["outputs"], generated_at)
    write_text_file(config.outputs_path, append_region(outputs_text, outputs_region), logger)
    logger.info(f"Outputs added to {config.outputs_path}")

    # Step 5: Initialise and import
    init_exit_code = terraform_init(config)
    logger.info("Importing queues to state...")
    results = import_all(config, queues)

    failed = [result for result in results if not result.success]
    if failed:
        logger.warning(f"{len(failed)} of {len(results)} import(s) failed")

    return {
        "region": config.region,
        "queues_found": len(queues),
        "modules": [queue.module_name for queue in queues],
        "module_calls_file": str(config.module_calls_path),
        "outputs_file": str(config.outputs_path),
        "dry_run": config.dry_run,
        "init_exit_code": init_exit_code,
        "imports": [result.to_dict() for result in results],
        "failed_imports": len(failed),
    }
