"""
SQS Resource Fetchers Module.

This module contains functions for fetching live SQS queue data.

Key points:
- Discovery keeps the order returned by ListQueues and drops duplicates.
- Attribute and tag lookups never raise: a failure is logged and an empty map is
  returned, so the queue is rendered with default settings and no tags.
"""

from typing import List

from botocore.exceptions import BotoCoreError, ClientError

from ...utils import fetcher_error_handler, setup_logging
from ..types import QueueAttributes, SQSClient, TagMap

logger = setup_logging()


def list_queue_urls(sqs_client: SQSClient) -> List[str]:
    """
    List every queue URL in the client's region.

    Returns an empty list when the region has no queues or the listing fails.
    """
    queue_urls: List[str] = []
    try:
        paginator = sqs_client.get_paginator("list_queues")
        for page in paginator.paginate():
            for queue_url in page.get("QueueUrls", []):
                if not isinstance(queue_url, str) or not queue_url.startswith("https://"):
                    logger.debug(f"[SQS] Ignoring malformed queue URL: {queue_url!r}")
                    continue
                if queue_url not in queue_urls:
                    queue_urls.append(queue_url)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"[SQS] Error listing queues: {e}")
        return []
    logger.debug(f"[SQS] Discovered queue URLs: {queue_urls}")
    return queue_urls


@fetcher_error_handler
def fetch_queue_attributes(sqs_client: SQSClient, queue_url: str) -> QueueAttributes:
    """Fetch all attributes of a queue as a string map."""
    response = sqs_client.get_queue_attributes(QueueUrl=queue_url, AttributeNames=["All"])
    attributes = response.get("Attributes", {})
    return {str(key): str(value) for key, value in attributes.items()}


@fetcher_error_handler
def fetch_queue_tags(sqs_client: SQSClient, queue_url: str) -> TagMap:
    """Fetch the tags of a queue. Queues without tags return an empty map."""
    response = sqs_client.list_queue_tags(QueueUrl=queue_url)
    tags = response.get("Tags") or {}
    return {str(key): str(value) for key, value in tags.items()}
