"""
SQS Fetchers Package.

This package contains the functions that read live queue data from AWS:
queue discovery, queue attributes and queue tags.
"""

from .base import get_sqs_client
from .sqs_fetchers import fetch_queue_attributes, fetch_queue_tags, list_queue_urls

__all__ = [
    "get_sqs_client",
    "list_queue_urls",
    "fetch_queue_attributes",
    "fetch_queue_tags",
]
