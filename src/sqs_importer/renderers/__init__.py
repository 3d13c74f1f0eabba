"""
Terraform Renderers Package.

This package turns queue data into Terraform text: the reusable SQS module
template and the per-queue module calls and outputs.
"""

from .block_renderers import render_module_call, render_queue_outputs
from .module_renderers import write_module

__all__ = [
    "render_module_call",
    "render_queue_outputs",
    "write_module",
]
