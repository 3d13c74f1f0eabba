"""
SQS Terraform Importer Package.

This package brings existing AWS SQS queues under Terraform management.

The import process:
1. Writes a reusable SQS module under modules/<name>
2. Lists the queues of a region and reads their attributes and tags
3. Replaces previously generated module calls and outputs with fresh ones
4. Runs terraform init and imports every queue into its module
"""

from .core import NoQueuesFoundError, import_queues

__all__ = ["import_queues", "NoQueuesFoundError"]
