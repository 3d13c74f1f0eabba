"""
Type definitions for the SQS Terraform Importer.

Aliases used across fetchers, renderers and the importer so that the shape of
each value is clear at the call site.
"""

# boto3 does not ship static stubs for service clients, so the SQS client is
# annotated as Any.
from typing import Any, Dict, List, Union

SQSClient = Any

# Raw GetQueueAttributes map: every value is a string on the wire
QueueAttributes = Dict[str, str]
TagMap = Dict[str, str]

# Terraform literal values accepted by the renderers
HCLValue = Union[str, int, bool, Dict[str, str]]

# Run report returned by import_queues()
ImportDetail = Dict[str, Union[str, int, bool]]
RunReport = Dict[str, Union[str, int, bool, None, List[str], List[ImportDetail]]]
