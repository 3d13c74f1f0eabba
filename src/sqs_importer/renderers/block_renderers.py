"""
Module Call and Output Renderers.

Renders the per-queue Terraform text: one module call that instantiates the
SQS module with the queue's settings and tags, and two outputs exposing the
module's queue URL and ARN. Rendering is deterministic: the same queue,
settings and tags always give the same text.
"""

from dataclasses import asdict
from typing import Dict

from ..queues import QueueDescriptor, QueueSettings
from ..types import HCLValue, TagMap
from .hcl import render_assignments, render_string_map, to_hcl_string


def render_module_call(
    queue: QueueDescriptor,
    settings: QueueSettings,
    tags: TagMap,
    module_source: str,
) -> str:
    """
    Render the `module "sqs_<id>"` block for one queue.

    Args:
        queue: Queue descriptor
        settings: Queue settings with defaults applied
        tags: Queue tags (may be empty)
        module_source: Source path of the SQS module, e.g. ./modules/sqs

    Returns:
        The module block, without a trailing newline
    """
    assignments: Dict[str, HCLValue] = {"queue_name": queue.name}
    # fifo_queue first, then the numeric settings in declaration order
    setting_values = asdict(settings)
    assignments["fifo_queue"] = setting_values.pop("fifo_queue")
    assignments.update(setting_values)

    lines = [f'module "{queue.module_name}" {{']
    lines.append(f"  source = {to_hcl_string(module_source)}")
    lines.append("")
    lines.extend(render_assignments(assignments))
    lines.append("")
    lines.extend(render_string_map("tags", tags))
    lines.append("}")
    return "\n".join(lines)


def render_queue_outputs(queue: QueueDescriptor) -> str:
    """Render the `_url` and `_arn` outputs for one queue."""
    blocks = []
    for suffix, label, module_output in (
        ("url", "URL", "queue_url"),
        ("arn", "ARN", "queue_arn"),
    ):
        description = to_hcl_string(f"{label} of the {queue.name} SQS queue")
        blocks.append(
            f'output "{queue.module_name}_{suffix}" {{\n'
            f"  description = {description}\n"
            f"  value       = module.{queue.module_name}.{module_output}\n"
            "}"
        )
    return "\n\n".join(blocks)
