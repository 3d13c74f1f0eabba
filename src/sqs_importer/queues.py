"""
SQS Queue Data Model.

This module holds the per-queue values that flow through a run: the descriptor
derived from the queue URL and the settings derived from the queue attributes.

Key points:
- Names come from the URL: the queue name is the last path segment and the
  account id the one before it.
- Safe identifiers are lowercase and only contain letters, digits and
  underscores, so they can be used in Terraform module and output names.
- Absent or unparseable attributes fall back to the SQS service defaults,
  which are also the defaults of the generated module variables.
"""

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .types import QueueAttributes

DEFAULT_VISIBILITY_TIMEOUT = 30
DEFAULT_MESSAGE_RETENTION = 345600
DEFAULT_MAX_MESSAGE_SIZE = 262144
DEFAULT_DELAY_SECONDS = 0
DEFAULT_RECEIVE_WAIT_TIME = 0

UNSAFE_IDENTIFIER_CHARS = re.compile(r"[^a-z0-9_]")


def to_safe_identifier(queue_name: str) -> str:
    """Lowercase a queue name and replace anything outside [a-z0-9_] with '_'."""
    return UNSAFE_IDENTIFIER_CHARS.sub("_", queue_name.lower())


@dataclass(frozen=True)
class QueueDescriptor:
    """A discovered queue and the Terraform names derived from it."""

    url: str
    name: str
    account_id: str
    resource_name: str

    @classmethod
    def from_url(cls, queue_url: str) -> "QueueDescriptor":
        """
        Build a descriptor from a queue URL.

        Raises:
            ValueError: If the URL has no queue name segment
        """
        segments = [segment for segment in urlparse(queue_url).path.split("/") if segment]
        if not segments:
            raise ValueError(f"Queue URL has no queue name: {queue_url!r}")
        name = segments[-1]
        account_id = segments[-2] if len(segments) > 1 else ""
        return cls(
            url=queue_url,
            name=name,
            account_id=account_id,
            resource_name=to_safe_identifier(name),
        )

    @property
    def module_name(self) -> str:
        return f"sqs_{self.resource_name}"

    @property
    def module_address(self) -> str:
        return f"module.{self.module_name}.aws_sqs_queue.main"

    def import_id(self, region: str) -> str:
        """Queue URL in the canonical form expected by `terraform import`."""
        return f"https://sqs.{region}.amazonaws.com/{self.account_id}/{self.name}"


@dataclass(frozen=True)
class QueueSettings:
    """Scalar queue settings rendered into each module call."""

    visibility_timeout_seconds: int = DEFAULT_VISIBILITY_TIMEOUT
    message_retention_seconds: int = DEFAULT_MESSAGE_RETENTION
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE
    delay_seconds: int = DEFAULT_DELAY_SECONDS
    receive_wait_time_seconds: int = DEFAULT_RECEIVE_WAIT_TIME
    fifo_queue: bool = False


def _int_attribute(attributes: QueueAttributes, key: str, default: int) -> int:
    value: Optional[str] = attributes.get(key)
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_queue_settings(attributes: QueueAttributes) -> QueueSettings:
    """
    Convert a GetQueueAttributes map into QueueSettings.

    Args:
        attributes: Attribute map as returned by SQS (string values)

    Returns:
        QueueSettings with defaults applied for absent fields
    """
    return QueueSettings(
        visibility_timeout_seconds=_int_attribute(
            attributes, "VisibilityTimeout", DEFAULT_VISIBILITY_TIMEOUT
        ),
        message_retention_seconds=_int_attribute(
            attributes, "MessageRetentionPeriod", DEFAULT_MESSAGE_RETENTION
        ),
        max_message_size=_int_attribute(
            attributes, "MaximumMessageSize", DEFAULT_MAX_MESSAGE_SIZE
        ),
        delay_seconds=_int_attribute(attributes, "DelaySeconds", DEFAULT_DELAY_SECONDS),
        receive_wait_time_seconds=_int_attribute(
            attributes, "ReceiveMessageWaitTimeSeconds", DEFAULT_RECEIVE_WAIT_TIME
        ),
        fifo_queue=str(attributes.get("FifoQueue", "")).strip().lower() == "true",
    )
