"""
Base SQS Fetchers Module.

Creates the boto3 SQS client used for discovery and attribute lookups.
"""

from typing import Optional

import boto3

from ..types import SQSClient


def get_sqs_client(region_name: str, profile: Optional[str] = None) -> SQSClient:
    """
    Create an SQS client for the given region.

    Args:
        region_name: AWS region to query
        profile: Optional named profile from the shared AWS config

    Returns:
        boto3 SQS client
    """
    if profile:
        session = boto3.Session(profile_name=profile)
        return session.client("sqs", region_name=region_name)
    return boto3.client("sqs", region_name=region_name)
