"""
Module Template Renderers.

Writes the reusable `aws_sqs_queue` module that every generated module call
points at. The template is fixed: one queue resource, one variable per queue
setting and two outputs. Variable defaults match the QueueSettings defaults.
"""

import shutil
from pathlib import Path
from typing import Dict

from ...utils import setup_logging, write_text_file
from ..queues import QueueSettings
from ..types import HCLValue
from .hcl import to_hcl_literal

logger = setup_logging()

SETTING_TYPES = {
    "fifo_queue": "bool",
    "visibility_timeout_seconds": "number",
    "message_retention_seconds": "number",
    "max_message_size": "number",
    "delay_seconds": "number",
    "receive_wait_time_seconds": "number",
}


def _setting_defaults() -> Dict[str, HCLValue]:
    defaults = QueueSettings()
    return {name: getattr(defaults, name) for name in SETTING_TYPES}


def render_module_main() -> str:
    references = {"name": "queue_name"}
    references.update({name: name for name in SETTING_TYPES})
    references["tags"] = "tags"
    width = max(len(name) for name in references)
    lines = ['resource "aws_sqs_queue" "main" {']
    for attribute, variable in references.items():
        lines.append(f"  {attribute.ljust(width)} = var.{variable}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_module_variables() -> str:
    blocks = ['variable "queue_name" {\n  type = string\n}']
    for name, default in _setting_defaults().items():
        blocks.append(
            f'variable "{name}" {{\n'
            f"  type    = {SETTING_TYPES[name]}\n"
            f"  default = {to_hcl_literal(default)}\n"
            "}"
        )
    blocks.append('variable "tags" {\n  type    = map(string)\n  default = {}\n}')
    return "\n\n".join(blocks) + "\n"


def render_module_outputs() -> str:
    return (
        'output "queue_url" {\n'
        "  value = aws_sqs_queue.main.id\n"
        "}\n"
        "\n"
        'output "queue_arn" {\n'
        "  value = aws_sqs_queue.main.arn\n"
        "}\n"
    )


def write_module(module_dir: Path) -> Path:
    """
    Write the module template, replacing any previous module directory.

    Args:
        module_dir: Directory of the module, e.g. modules/sqs

    Returns:
        The module directory
    """
    if module_dir.exists():
        logger.info(f"Module folder {module_dir} already exists. Overwriting...")
        shutil.rmtree(module_dir)
    module_dir.mkdir(parents=True)

    write_text_file(module_dir / "main.tf", render_module_main(), logger)
    write_text_file(module_dir / "variables.tf", render_module_variables(), logger)
    write_text_file(module_dir / "outputs.tf", render_module_outputs(), logger)

    logger.info(f"Module created at {module_dir}")
    return module_dir
